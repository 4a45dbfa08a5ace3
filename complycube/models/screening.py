# complycube/models/screening.py

"""
Pydantic models for AML/PEP screening checks.

Defines the request body sent to ``POST /checks`` and the check result
returned by the screening endpoints, plus the risk assessment derived
from a result.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .company import WireModel


class ScreeningCheckType(str, Enum):
    """Supported screening check types."""

    STANDARD = "standard_screening_check"
    EXTENSIVE = "extensive_screening_check"


class ScreeningOutcome(str, Enum):
    """Coarse verdict of a screening check."""

    CLEAR = "clear"
    ATTENTION = "attention"
    NOT_PROCESSED = "not_processed"


class ScreeningNameSearchMode(str, Enum):
    FUZZY = "fuzzy"
    PRECISE = "precise"


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


# =============================================================================
# Request
# =============================================================================


class RequestModel(BaseModel):
    """Base for request bodies: camelCase on the wire, enums sent as values."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="forbid",
    )


class ScreeningClassification(RequestModel):
    watchlists: Optional[list[str]] = None
    pep_levels: Optional[list[str]] = None
    adverse_media: Optional[list[str]] = None


class ScreeningListsScope(RequestModel):
    include: Optional[list[str]] = None
    exclude: Optional[list[str]] = None


class ScreeningOptions(RequestModel):
    screening_lists_scope: Optional[ScreeningListsScope] = None
    screening_name_search_mode: Optional[ScreeningNameSearchMode] = Field(
        default=None, description="Name matching strategy: fuzzy or precise."
    )
    screening_classification: Optional[ScreeningClassification] = None


class ScreeningCheckRequest(RequestModel):
    """Input for creating an AML screening check."""

    client_id: str = Field(description="ComplyCube client to screen.")
    type: ScreeningCheckType = Field(description="Standard or extensive screening.")
    enable_monitoring: Optional[bool] = Field(
        default=None, description="Keep the client under ongoing monitoring."
    )
    options: Optional[ScreeningOptions] = None

    def to_wire(self) -> dict:
        """Serialize to the JSON body expected by ``POST /checks``."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# =============================================================================
# Result
# =============================================================================


class ScreeningMatch(WireModel):
    """A single hit against a watchlist, PEP list or adverse media source."""

    id: Optional[str] = None
    name: Optional[str] = None
    confidence: Optional[float] = Field(default=0.0, description="Match confidence score.")
    category: Optional[str] = None
    list_name: Optional[str] = None
    pep_level: Optional[str] = None
    sources: Optional[list[str]] = None
    date_of_birth: Optional[str] = None
    place_of_birth: Optional[str] = None
    nationality: Optional[str] = None
    description: Optional[str] = None


class ScreeningSummary(WireModel):
    watchlist_matches: int = 0
    pep_matches: int = 0
    adverse_media_matches: int = 0
    total_matches: int = 0


class ScreeningBreakdown(WireModel):
    summary: ScreeningSummary = Field(default_factory=ScreeningSummary)
    matches: list[ScreeningMatch] = Field(default_factory=list)


class ScreeningCheckResult(WireModel):
    """Screening check as returned by the ``/checks`` endpoints."""

    id: Optional[str] = None
    client_id: Optional[str] = None
    # type and outcome are kept as plain strings so an unexpected value from
    # the API does not fail the whole response; compare against the enums.
    type: Optional[str] = None
    outcome: str = Field(description="clear, attention or not_processed.")
    breakdown: ScreeningBreakdown = Field(default_factory=ScreeningBreakdown)
    enable_monitoring: Optional[bool] = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class RiskAssessment(BaseModel):
    """Risk classification derived from a screening result."""

    risk_level: RiskLevel
    recommendations: list[str] = Field(default_factory=list)
    summary: str
