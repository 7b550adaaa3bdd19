"""Pydantic models for the rules & risk engine and its API surface."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Enumerations ─────────────────────────────────────────────────

class RiskTag(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Urgency(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"


class DocumentStatus(str, Enum):
    MISSING = "Missing"
    DRAFT = "Draft"
    READY = "Ready"
    FILED = "Filed"


class CongestionTier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class StormRiskTier(str, Enum):
    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    SEVERE = "severe"


# ── Tariff classification ────────────────────────────────────────

class TariffEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    hs_code: str
    short_description: str
    long_description: str
    keywords: tuple[str, ...]
    category: str
    subcategory: str
    duty_rate_percent: float = Field(ge=0)
    tax_rate_percent: float = Field(ge=0)
    risk_tag: RiskTag
    likely_origin_ports: tuple[str, ...] = ()


class ClassificationQuery(BaseModel):
    category: Optional[str] = None
    subcategory: Optional[str] = None
    free_text_description: str


class ClassificationMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    entry: TariffEntry
    confidence: int = Field(ge=0, le=99)


# ── Compliance documents ─────────────────────────────────────────

class DocumentDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    document_id: str
    label: str
    abbreviation: str
    description: str = ""
    issuing_authority: str
    urgency: Urgency
    estimated_processing_days: int = Field(gt=0)


class RequiredDocument(DocumentDefinition):
    reason: str = Field(min_length=1)
    sector_note: Optional[str] = None


class ExporterDetails(BaseModel):
    company_name: str = ""
    director: str = ""
    address: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = "Maroc"
    rc: str = ""
    ice: str = ""
    tax_id: str = ""
    email: str = ""
    phone: str = ""


class ConsigneeDetails(BaseModel):
    company_name: str = ""
    address: str = ""
    city: str = ""
    country: str = ""
    vat_number: str = ""
    contact_email: str = ""


class FieldCompletionContext(BaseModel):
    exporter: ExporterDetails = Field(default_factory=ExporterDetails)
    consignee: ConsigneeDetails = Field(default_factory=ConsigneeDetails)
    quantity: float = 0
    unit_price: float = 0


class ChecklistSummary(BaseModel):
    status_counts: dict[str, int]
    complete_count: int
    total: int
    progress_percent: int
    outstanding_critical: list[str]
    can_finalize: bool


# ── Weather risk ─────────────────────────────────────────────────

class PortWeatherSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    port_id: str
    wind_speed_knots: float = Field(ge=0, allow_inf_nan=False)
    visibility_meters: float = Field(ge=0, allow_inf_nan=False)
    has_storm_alert: bool = False
    temperature_celsius: float = 20.0
    port_name: Optional[str] = None
    weather_description: Optional[str] = None


class RiskBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_coefficient: float
    wind_contribution: float
    congestion_contribution: float
    estimated_delay_days: float


class RiskAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    multiplier: float = Field(ge=1.0)
    port_congestion_tier: CongestionTier
    storm_risk_tier: StormRiskTier
    breakdown: RiskBreakdown
    samples: tuple[PortWeatherSample, ...]


# ── Request schemas ──────────────────────────────────────────────

class RankRequest(ClassificationQuery):
    limit: Optional[int] = Field(default=None, ge=1, le=25)
    jitter: bool = False


class ChecklistRequest(BaseModel):
    hs_code: str
    destination_market: str


class DocumentStatusRequest(ChecklistRequest):
    context: FieldCompletionContext = Field(default_factory=FieldCompletionContext)
    filed_ids: list[str] = []


class EFactorRequest(BaseModel):
    samples: list[PortWeatherSample]
