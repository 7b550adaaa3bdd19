"""Checklist Builder — which export documents a shipment legally needs.

Four base documents are always required. On top of them, an ordered
table of independent rules keyed by HS chapter and destination market
each contributes at most one document with its own justification.
Rules are additive: several may fire for one shipment, and output
order is table order.

Malformed HS codes resolve to chapter 0, which no chapter-gated rule
matches, so the result degrades to the base documents rather than
raising.
"""

from typing import Callable, NamedTuple

from exportdesk.data.document_catalog import DOCUMENT_CATALOG
from exportdesk.data.reference_tables import CITES_FLORA_PREFIXES, normalize_market
from exportdesk.data.tariff_catalog import normalize_hs_code
from exportdesk.schemas.shipment import RequiredDocument


class RuleContext(NamedTuple):
    chapter: int
    hs_digits: str
    market: str


class DocumentRule(NamedTuple):
    applies: Callable[[RuleContext], bool]
    document_id: str
    reason: str
    sector_note: str | None = None


def _food(ctx: RuleContext) -> bool:
    return 1 <= ctx.chapter <= 24


def _electrical(ctx: RuleContext) -> bool:
    return ctx.chapter in (84, 85)


BASE_RULES: tuple[DocumentRule, ...] = (
    DocumentRule(lambda ctx: True, "commercial_invoice",
                 "Required for all international export shipments"),
    DocumentRule(lambda ctx: True, "packing_list",
                 "Required for customs clearance at all ports"),
    DocumentRule(lambda ctx: True, "bill_of_lading",
                 "Issued by carrier; required for all maritime cargo"),
    DocumentRule(lambda ctx: True, "certificate_of_origin",
                 "Certifies Moroccan origin; required by all destination customs"),
)

CONDITIONAL_RULES: tuple[DocumentRule, ...] = (
    # EU market
    DocumentRule(
        lambda ctx: ctx.market == "EU", "eur1_certificate",
        "Morocco-EU Association Agreement: grants zero or reduced preferential tariff rates",
        "Submit via ADII portal at least 5 business days before export",
    ),
    DocumentRule(
        lambda ctx: ctx.market == "EU", "csddd_compliance",
        "EU CSDDD Directive 2024/1760: mandatory for EU corporate buyers from 2027 "
        "(voluntary best practice now)",
        "Covers supply chain due diligence: labor rights, carbon footprint, environmental impact",
    ),
    # UK market
    DocumentRule(
        lambda ctx: ctx.market == "UK", "eur1_certificate",
        "UK-Morocco Association Agreement retains EUR.1 preferential rates",
    ),
    # USA / GCC food imports
    DocumentRule(
        lambda ctx: ctx.market == "USA" and _food(ctx), "fda_prior_notice",
        "FDA Prior Notice required for food/agriculture imports into the US",
    ),
    DocumentRule(
        lambda ctx: ctx.market == "GCC" and _food(ctx), "halal_certificate",
        "Mandatory for food products entering GCC / Saudi Arabia markets",
    ),
    # Food & beverages, chapters 01-24
    DocumentRule(
        _food, "onssa_certificate",
        "Moroccan law requires ONSSA approval for all food & agriculture exports",
        "Applies to HS chapters 01-24: fresh produce, processed foods, beverages, oils",
    ),
    # Plant products, chapters 06-14
    DocumentRule(
        lambda ctx: 6 <= ctx.chapter <= 14, "phytosanitary_certificate",
        "International Plant Protection Convention (IPPC) requires phytosanitary "
        "certification for plant exports",
    ),
    # Animal products, chapters 01-05 and 16
    DocumentRule(
        lambda ctx: 1 <= ctx.chapter <= 5 or ctx.chapter == 16, "health_certificate",
        "Animal products require veterinary health certificate from ONSSA",
    ),
    # Electrical equipment, chapters 84-85
    DocumentRule(
        lambda ctx: _electrical(ctx) and ctx.market == "EU", "ce_declaration",
        "CE marking mandatory for electrical/electronic equipment in EU single market",
    ),
    DocumentRule(
        lambda ctx: _electrical(ctx) and ctx.market == "UK", "uk_conformity",
        "UKCA marking mandatory for electrical goods entering the UK market",
    ),
    # Endangered flora watch-list
    DocumentRule(
        lambda ctx: ctx.hs_digits[:4] in CITES_FLORA_PREFIXES, "cites_permit",
        "Product may be derived from CITES Appendix-listed flora; permit required",
        "Verify against CITES Appendix I/II/III before export",
    ),
)


def hs_chapter(hs_code: str | None) -> int:
    """Two-digit HS chapter, or 0 when the code is missing or malformed."""
    digits = normalize_hs_code(hs_code)
    head = digits[:2]
    if len(head) != 2 or not (head.isascii() and head.isdigit()):
        return 0
    return int(head)


class ChecklistBuilder:
    """Derive the required-document checklist for an HS code and market."""

    def __init__(self, rules: tuple[DocumentRule, ...] | None = None):
        self.rules = BASE_RULES + (CONDITIONAL_RULES if rules is None else rules)

    def derive_checklist(self, hs_code: str | None, destination_market: str | None) -> list[RequiredDocument]:
        ctx = RuleContext(
            chapter=hs_chapter(hs_code),
            hs_digits=normalize_hs_code(hs_code),
            market=normalize_market(destination_market),
        )

        checklist: list[RequiredDocument] = []
        positions: dict[str, int] = {}
        for rule in self.rules:
            if not rule.applies(ctx):
                continue
            existing = positions.get(rule.document_id)
            if existing is not None:
                # Same document from two rules: keep the first slot, join reasons.
                doc = checklist[existing]
                checklist[existing] = doc.model_copy(
                    update={"reason": f"{doc.reason}; {rule.reason}"}
                )
                continue
            definition = DOCUMENT_CATALOG[rule.document_id]
            positions[rule.document_id] = len(checklist)
            checklist.append(RequiredDocument(
                **definition.model_dump(),
                reason=rule.reason,
                sector_note=rule.sector_note,
            ))

        return checklist
