"""Document catalog — every compliance document an export file can need,
plus the form fields each document type draws on.
"""

from exportdesk.schemas.shipment import DocumentDefinition

_DOCUMENTS: list[dict] = [
    {"document_id": "commercial_invoice", "label": "Commercial Invoice", "abbreviation": "CI",
     "description": "Primary export document listing goods, values, HS codes, and parties",
     "issuing_authority": "Exporter", "urgency": "critical", "estimated_processing_days": 1},
    {"document_id": "packing_list", "label": "Packing List", "abbreviation": "PL",
     "description": "Detailed breakdown of packages, weights, and dimensions",
     "issuing_authority": "Exporter", "urgency": "critical", "estimated_processing_days": 1},
    {"document_id": "bill_of_lading", "label": "Bill of Lading", "abbreviation": "B/L",
     "description": "Contract of carriage and proof of receipt for goods by carrier",
     "issuing_authority": "Shipping Line / Freight Forwarder", "urgency": "critical",
     "estimated_processing_days": 3},
    {"document_id": "certificate_of_origin", "label": "Certificate of Origin", "abbreviation": "CO",
     "description": "Certifies goods originate in Morocco; required by all importers",
     "issuing_authority": "CGEM / Chamber of Commerce (Casablanca)", "urgency": "critical",
     "estimated_processing_days": 2},
    {"document_id": "eur1_certificate", "label": "EUR.1 Movement Certificate", "abbreviation": "EUR.1",
     "description": "Grants preferential tariff rates under the Morocco-EU Association Agreement",
     "issuing_authority": "Moroccan Customs (ADII)", "urgency": "critical",
     "estimated_processing_days": 4},
    {"document_id": "csddd_compliance", "label": "CSDDD Compliance Declaration", "abbreviation": "CSDDD",
     "description": "EU Corporate Sustainability Due Diligence Directive: labor, environmental "
                    "and carbon standards",
     "issuing_authority": "Exporter + Third-party Auditor", "urgency": "high",
     "estimated_processing_days": 7},
    {"document_id": "onssa_certificate", "label": "ONSSA Food Safety Certificate", "abbreviation": "ONSSA",
     "description": "Moroccan National Office for Food Safety; mandatory for all food/agri exports",
     "issuing_authority": "ONSSA (Office National de Sécurité Sanitaire des Aliments)",
     "urgency": "critical", "estimated_processing_days": 5},
    {"document_id": "phytosanitary_certificate", "label": "Phytosanitary Certificate", "abbreviation": "PC",
     "description": "Certifies plant products are free from pests and diseases",
     "issuing_authority": "ONSSA Plant Protection Directorate", "urgency": "high",
     "estimated_processing_days": 3},
    {"document_id": "health_certificate", "label": "Veterinary / Health Certificate", "abbreviation": "VC",
     "description": "Required for animal products confirming health and safety standards",
     "issuing_authority": "ONSSA Veterinary Directorate", "urgency": "critical",
     "estimated_processing_days": 4},
    {"document_id": "cites_permit", "label": "CITES Export Permit", "abbreviation": "CITES",
     "description": "Convention on International Trade in Endangered Species; required for "
                    "protected flora/fauna",
     "issuing_authority": "Haut Commissariat aux Eaux et Forêts", "urgency": "critical",
     "estimated_processing_days": 14},
    {"document_id": "ce_declaration", "label": "CE Declaration of Conformity", "abbreviation": "CE",
     "description": "Required for electrical/electronic goods entering the EU single market",
     "issuing_authority": "Notified Body / Manufacturer", "urgency": "high",
     "estimated_processing_days": 10},
    {"document_id": "halal_certificate", "label": "Halal Certification", "abbreviation": "HC",
     "description": "Mandatory for food products exported to GCC / Islamic markets",
     "issuing_authority": "IMANOR / Recognised Halal Body", "urgency": "critical",
     "estimated_processing_days": 7},
    {"document_id": "fda_prior_notice", "label": "FDA Prior Notice", "abbreviation": "FDA",
     "description": "US Food & Drug Administration prior notice for food imports into the United States",
     "issuing_authority": "US FDA (submitted by importer)", "urgency": "high",
     "estimated_processing_days": 2},
    {"document_id": "uk_conformity", "label": "UKCA Conformity Declaration", "abbreviation": "UKCA",
     "description": "UK Conformity Assessed mark; replaces CE marking for the UK market",
     "issuing_authority": "UK Approved Body", "urgency": "high",
     "estimated_processing_days": 10},
]

DOCUMENT_CATALOG: dict[str, DocumentDefinition] = {
    row["document_id"]: DocumentDefinition(**row) for row in _DOCUMENTS
}

BASE_DOCUMENT_IDS: tuple[str, ...] = (
    "commercial_invoice",
    "packing_list",
    "bill_of_lading",
    "certificate_of_origin",
)

# ── Required form fields per document type ───────────────────────
# Paths are "<section>.<attribute>" for party records, or a bare
# shipment field name.
REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "commercial_invoice": (
        "exporter.company_name", "exporter.address", "exporter.city",
        "consignee.company_name", "consignee.country", "quantity", "unit_price",
    ),
    "eur1_certificate": (
        "exporter.company_name", "exporter.address", "exporter.city",
        "consignee.company_name", "consignee.country",
    ),
    "certificate_of_origin": (
        "exporter.company_name", "exporter.address", "exporter.city",
        "consignee.company_name", "consignee.country",
    ),
    "packing_list": ("exporter.company_name", "consignee.company_name", "quantity"),
    "bill_of_lading": ("exporter.company_name", "consignee.company_name", "consignee.country"),
}

DEFAULT_REQUIRED_FIELDS: tuple[str, ...] = ("exporter.company_name", "exporter.city")
