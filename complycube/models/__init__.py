# complycube/models/__init__.py

"""
Data models for the ComplyCube compliance client.

Defines Pydantic models for company records, screening checks and the
response envelope shared by every client.
"""

from .company import (
    CompanyAddress,
    CompanyFiling,
    CompanyOfficer,
    CompanyOwner,
    CompanyRecord,
    IndustryCode,
)
from .envelope import ApiErrorDetail, ApiResponse, ClientConfig
from .screening import (
    RiskAssessment,
    RiskLevel,
    ScreeningBreakdown,
    ScreeningCheckRequest,
    ScreeningCheckResult,
    ScreeningCheckType,
    ScreeningClassification,
    ScreeningListsScope,
    ScreeningMatch,
    ScreeningNameSearchMode,
    ScreeningOptions,
    ScreeningOutcome,
    ScreeningSummary,
)

# Public API for the models package
__all__ = [
    "CompanyAddress",
    "CompanyFiling",
    "CompanyOfficer",
    "CompanyOwner",
    "CompanyRecord",
    "IndustryCode",
    "ApiErrorDetail",
    "ApiResponse",
    "ClientConfig",
    "RiskAssessment",
    "RiskLevel",
    "ScreeningBreakdown",
    "ScreeningCheckRequest",
    "ScreeningCheckResult",
    "ScreeningCheckType",
    "ScreeningClassification",
    "ScreeningListsScope",
    "ScreeningMatch",
    "ScreeningNameSearchMode",
    "ScreeningOptions",
    "ScreeningOutcome",
    "ScreeningSummary",
]
