"""Tariff catalog — static HS classification reference data.

Each entry maps a dotted HS code to its descriptions, matching keywords,
category/subcategory, EU duty and Moroccan tax rates, a qualitative
risk tag and the ports the goods usually leave from. The catalog is
built once at import time and never mutated.
"""

from exportdesk.schemas.shipment import TariffEntry

# ── Categories & Sub-categories ──────────────────────────────────
CATEGORIES: list[dict] = [
    {
        "id": "agri",
        "label": "Agricultural & Food Products",
        "subcategories": [
            {"id": "oils", "label": "Oils & Fats"},
            {"id": "spices", "label": "Spices & Herbs"},
            {"id": "fruits", "label": "Fruits & Vegetables"},
            {"id": "cereals", "label": "Cereals & Grains"},
            {"id": "agri_other", "label": "Other Agricultural"},
        ],
    },
    {
        "id": "textile",
        "label": "Textiles & Clothing",
        "subcategories": [
            {"id": "carpets", "label": "Carpets & Rugs"},
            {"id": "garments", "label": "Garments & Apparel"},
            {"id": "fabrics", "label": "Fabrics & Yarn"},
        ],
    },
    {
        "id": "mineral",
        "label": "Minerals & Chemicals",
        "subcategories": [
            {"id": "phosphates", "label": "Phosphates & Derivatives"},
            {"id": "chemicals", "label": "Industrial Chemicals"},
            {"id": "metals", "label": "Metals & Ores"},
        ],
    },
    {
        "id": "marine",
        "label": "Marine & Fishery Products",
        "subcategories": [
            {"id": "fresh", "label": "Fresh & Frozen Fish"},
            {"id": "processed", "label": "Canned & Processed"},
            {"id": "shellfish", "label": "Shellfish & Crustaceans"},
        ],
    },
    {
        "id": "mfg",
        "label": "Manufactured & Craft Goods",
        "subcategories": [
            {"id": "automotive", "label": "Automotive Components"},
            {"id": "electronics", "label": "Electronics & Cables"},
            {"id": "crafts", "label": "Artisan & Craft Products"},
        ],
    },
]

# ── Catalog rows ─────────────────────────────────────────────────
_ROWS: list[dict] = [
    # Agricultural / Oils
    {"hs_code": "1515.30", "short_description": "Argan Oil (Cosmetic & Edible Grade)",
     "long_description": "Fixed vegetable fats and oils of Argania spinosa, crude or refined",
     "keywords": ("argan", "argan oil", "oil", "cosmetic", "beauty", "edible"),
     "category": "agri", "subcategory": "oils",
     "duty_rate_percent": 7.5, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Agadir", "Casablanca")},
    {"hs_code": "1509.10", "short_description": "Extra Virgin Olive Oil",
     "long_description": "Olive oil and its fractions, virgin grade, not chemically modified",
     "keywords": ("olive", "olive oil", "virgin", "huile", "hdida"),
     "category": "agri", "subcategory": "oils",
     "duty_rate_percent": 0, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Casablanca", "Tanger Med")},
    {"hs_code": "1515.50", "short_description": "Sesame Oil (Crude or Refined)",
     "long_description": "Sesame oil and its fractions, crude or refined, not chemically modified",
     "keywords": ("sesame", "sesame oil", "graines de sésame"),
     "category": "agri", "subcategory": "oils",
     "duty_rate_percent": 5, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Agadir", "Casablanca")},

    # Agricultural / Spices
    {"hs_code": "0910.99", "short_description": "Mixed Spices & Blends (incl. Ras el Hanout)",
     "long_description": "Mixtures of spices: ginger, saffron, turmeric, thyme, bay leaves and others",
     "keywords": ("spice", "spices", "ras el hanout", "mixed spice", "blend", "épices"),
     "category": "agri", "subcategory": "spices",
     "duty_rate_percent": 12.5, "tax_rate_percent": 20, "risk_tag": "medium",
     "likely_origin_ports": ("Casablanca", "Agadir")},
    {"hs_code": "0909.21", "short_description": "Cumin Seeds (Crushed or Ground)",
     "long_description": "Seeds of coriander, anise, badian, caraway or fennel; juniper berries",
     "keywords": ("cumin", "cumin seeds", "ground cumin", "seed"),
     "category": "agri", "subcategory": "spices",
     "duty_rate_percent": 5, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Casablanca",)},
    {"hs_code": "0910.20", "short_description": "Saffron, Premium Grade (Taliouine)",
     "long_description": "Saffron, dried stigmas of Crocus sativus, whole or ground",
     "keywords": ("saffron", "safran", "taliouine", "crocus"),
     "category": "agri", "subcategory": "spices",
     "duty_rate_percent": 15, "tax_rate_percent": 20, "risk_tag": "medium",
     "likely_origin_ports": ("Agadir", "Casablanca")},

    # Agricultural / Fruits & Vegetables
    {"hs_code": "0805.10", "short_description": "Oranges, Fresh or Dried",
     "long_description": "Citrus fruit, fresh or dried: oranges",
     "keywords": ("orange", "citrus", "clementine", "agrumes"),
     "category": "agri", "subcategory": "fruits",
     "duty_rate_percent": 16, "tax_rate_percent": 20, "risk_tag": "high",
     "likely_origin_ports": ("Agadir", "Casablanca")},
    {"hs_code": "0702.00", "short_description": "Tomatoes, Fresh or Chilled",
     "long_description": "Tomatoes, fresh or chilled",
     "keywords": ("tomato", "tomatoes", "tomate", "fresh vegetable"),
     "category": "agri", "subcategory": "fruits",
     "duty_rate_percent": 14.4, "tax_rate_percent": 20, "risk_tag": "high",
     "likely_origin_ports": ("Agadir", "Kenitra")},
    {"hs_code": "0804.10", "short_description": "Dates (Fresh, Dried, Medjool)",
     "long_description": "Dates, figs, pineapples, avocados, guavas, mangoes and mangosteens: dates",
     "keywords": ("date", "dates", "medjool", "palm", "dattes"),
     "category": "agri", "subcategory": "fruits",
     "duty_rate_percent": 3.2, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Agadir", "Casablanca")},

    # Textiles / Carpets
    {"hs_code": "5701.10", "short_description": "Berber Wool Knotted Carpets",
     "long_description": "Carpets and other textile floor coverings, knotted, of wool or fine animal hair",
     "keywords": ("carpet", "rug", "berber", "wool", "knotted", "handmade", "tapis"),
     "category": "textile", "subcategory": "carpets",
     "duty_rate_percent": 8, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Casablanca", "Tanger Med")},
    {"hs_code": "5702.31", "short_description": "Machine-Made Woven Carpets (Wool)",
     "long_description": "Carpets and other textile floor coverings, woven, of wool or fine animal hair",
     "keywords": ("machine carpet", "woven carpet", "wool rug", "industrial carpet"),
     "category": "textile", "subcategory": "carpets",
     "duty_rate_percent": 12, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Casablanca",)},

    # Textiles / Garments
    {"hs_code": "6203.42", "short_description": "Men's Trousers & Breeches (Cotton)",
     "long_description": "Men's or boys' suits, ensembles, jackets, trousers, of cotton",
     "keywords": ("trouser", "pants", "jeans", "men's clothing", "cotton trousers"),
     "category": "textile", "subcategory": "garments",
     "duty_rate_percent": 12, "tax_rate_percent": 20, "risk_tag": "medium",
     "likely_origin_ports": ("Tanger Med", "Casablanca")},
    {"hs_code": "6204.42", "short_description": "Women's Dresses & Suits (Cotton)",
     "long_description": "Women's or girls' suits, ensembles, jackets, dresses, of cotton",
     "keywords": ("dress", "women's clothing", "caftan", "djellaba", "textile export"),
     "category": "textile", "subcategory": "garments",
     "duty_rate_percent": 12, "tax_rate_percent": 20, "risk_tag": "medium",
     "likely_origin_ports": ("Tanger Med", "Casablanca")},

    # Minerals / Phosphates & Chemicals
    {"hs_code": "2510.10", "short_description": "Natural Calcium Phosphates (Phosphate Rock)",
     "long_description": "Natural calcium phosphates, aluminium calcium phosphates, unground",
     "keywords": ("phosphate", "phosphate rock", "ocp", "mineral", "fertilizer raw"),
     "category": "mineral", "subcategory": "phosphates",
     "duty_rate_percent": 0, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Casablanca", "Jorf Lasfar")},
    {"hs_code": "2809.20", "short_description": "Phosphoric Acid (Industrial Grade)",
     "long_description": "Diphosphorus pentaoxide; phosphoric acid; polyphosphoric acids",
     "keywords": ("phosphoric acid", "acid", "chemical", "fertilizer", "phosphate processing"),
     "category": "mineral", "subcategory": "phosphates",
     "duty_rate_percent": 0, "tax_rate_percent": 20, "risk_tag": "medium",
     "likely_origin_ports": ("Jorf Lasfar", "Casablanca")},
    {"hs_code": "3104.20", "short_description": "Potassium Chloride (Potash Fertilizer)",
     "long_description": "Potassium chloride for use as fertilizers",
     "keywords": ("potassium", "potash", "chloride", "fertilizer", "chemical"),
     "category": "mineral", "subcategory": "chemicals",
     "duty_rate_percent": 0, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Casablanca",)},

    # Marine
    {"hs_code": "1604.13", "short_description": "Canned Sardines in Olive Oil",
     "long_description": "Prepared or preserved fish: sardines, sardinella, brisling or sprats",
     "keywords": ("sardine", "canned fish", "preserved fish", "olive oil fish", "conserve"),
     "category": "marine", "subcategory": "processed",
     "duty_rate_percent": 15, "tax_rate_percent": 20, "risk_tag": "medium",
     "likely_origin_ports": ("Agadir", "Safi", "Laayoune")},
    {"hs_code": "0307.43", "short_description": "Frozen Octopus (Cleaned, Whole)",
     "long_description": "Molluscs: octopus, frozen, excluding in shell",
     "keywords": ("octopus", "poulpe", "frozen", "seafood", "cephalopod"),
     "category": "marine", "subcategory": "shellfish",
     "duty_rate_percent": 10, "tax_rate_percent": 20, "risk_tag": "high",
     "likely_origin_ports": ("Agadir", "Dakhla", "Laayoune")},
    {"hs_code": "0303.89", "short_description": "Frozen Atlantic Fish (Other species)",
     "long_description": "Fish, frozen: other fish, excluding fish fillets and other fish meat",
     "keywords": ("fish", "frozen fish", "atlantic", "hake", "sea bream", "poisson"),
     "category": "marine", "subcategory": "fresh",
     "duty_rate_percent": 8, "tax_rate_percent": 20, "risk_tag": "medium",
     "likely_origin_ports": ("Agadir", "Dakhla")},

    # Manufactured
    {"hs_code": "8544.30", "short_description": "Automotive Wiring Harnesses",
     "long_description": "Ignition wiring sets and other wiring sets used in vehicles, aircraft or ships",
     "keywords": ("wire harness", "wiring", "automotive", "cable set", "vehicle wiring",
                  "renault", "stellantis"),
     "category": "mfg", "subcategory": "automotive",
     "duty_rate_percent": 3.5, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Tanger Med", "Casablanca")},
    {"hs_code": "8544.42", "short_description": "Electric Conductors & Power Cables",
     "long_description": "Electric conductors for a voltage not exceeding 1,000 V, fitted with connectors",
     "keywords": ("cable", "electric", "conductor", "power cable", "wire"),
     "category": "mfg", "subcategory": "electronics",
     "duty_rate_percent": 3.5, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Tanger Med", "Casablanca")},
    {"hs_code": "6913.10", "short_description": "Artisan Pottery & Terracotta (Decorative)",
     "long_description": "Statuettes and other ornamental ceramic articles, of porcelain or china",
     "keywords": ("pottery", "ceramic", "terracotta", "zellige", "artisan", "craft", "decorative"),
     "category": "mfg", "subcategory": "crafts",
     "duty_rate_percent": 4.7, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Casablanca", "Tanger Med")},
    {"hs_code": "4602.19", "short_description": "Wickerwork & Basketry (Esparto/Reed)",
     "long_description": "Basketwork, wickerwork and other articles of plaiting materials, "
                         "of other vegetable materials",
     "keywords": ("basket", "wickerwork", "esparto", "artisan", "reed", "handcraft", "vannerie"),
     "category": "mfg", "subcategory": "crafts",
     "duty_rate_percent": 3.7, "tax_rate_percent": 20, "risk_tag": "low",
     "likely_origin_ports": ("Casablanca", "Agadir")},
]

TARIFF_CATALOG: tuple[TariffEntry, ...] = tuple(TariffEntry(**row) for row in _ROWS)


def normalize_hs_code(hs_code: str | None) -> str:
    """Strip separators and whitespace: '1515.30' -> '151530'."""
    if not hs_code:
        return ""
    return "".join(ch for ch in str(hs_code) if ch not in ".-" and not ch.isspace())


def lookup_tariff(hs_code: str | None) -> TariffEntry | None:
    """Resolve an HS code to its catalog entry, ignoring separators."""
    key = normalize_hs_code(hs_code)
    if not key:
        return None
    for entry in TARIFF_CATALOG:
        if normalize_hs_code(entry.hs_code) == key:
            return entry
    return None


def list_categories() -> list[dict]:
    return CATEGORIES
