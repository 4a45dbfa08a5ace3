# complycube/__init__.py

"""
ComplyCube compliance client.

Company lookups and AML/PEP screening checks against the ComplyCube REST
API, returning ApiResponse envelopes, plus pure helpers to assess the
returned records.
"""

from complycube.analysis import analyze_screening_result, assess_overall_risk
from complycube.models import ApiErrorDetail, ApiResponse
from complycube.services import CompanyLookupClient, ScreeningClient
from complycube.utils.validators import validate_company_data

__version__ = "1.0.0"

__all__ = [
    "ApiErrorDetail",
    "ApiResponse",
    "CompanyLookupClient",
    "ScreeningClient",
    "analyze_screening_result",
    "assess_overall_risk",
    "validate_company_data",
]
