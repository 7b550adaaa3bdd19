"""Reference tables for the rules & risk engine: destination markets,
monitored ports, and HS watch-lists.
"""

# ── Destination Markets ──────────────────────────────────────────
TARGET_MARKETS: list[dict] = [
    {"value": "EU", "label": "European Union"},
    {"value": "UK", "label": "United Kingdom"},
    {"value": "USA", "label": "United States"},
    {"value": "GCC", "label": "Gulf / GCC States"},
    {"value": "OTHER", "label": "Other Markets"},
]


def normalize_market(market: str | None) -> str:
    """Upper-case a market code; unknown codes pass through unchanged."""
    return (market or "").upper().strip()


# ── Monitored Ports (weather / E-Factor) ─────────────────────────
MONITORED_PORTS: dict[str, dict] = {
    "tanger-med": {"lat": 35.8833, "lon": -5.5000, "name": "Tanger Med"},
    "casablanca": {"lat": 33.6000, "lon": -7.6164, "name": "Casablanca"},
    "agadir": {"lat": 30.4300, "lon": -9.6000, "name": "Agadir"},
}


# ── Endangered flora watch-list (4-digit HS prefixes) ────────────
# Live plants, natural resins, fuel wood and rough wood.
CITES_FLORA_PREFIXES: tuple[str, ...] = ("0602", "1301", "4401", "4403")
