# complycube/utils/__init__.py

"""
Utility package for the ComplyCube compliance client.

Contains standalone, reusable helper modules:
- api_client: Shared HTTP round trip with timeout and status-to-error mapping.
- logger: Centralized logging configuration (structlog).
- validators: Local request validation and company data-quality checks.
"""

from .api_client import ApiClient, StatusErrorTable  # Defined in api_client.py
from .logger import get_logger  # Defined in logger.py
from .validators import (
    CompanyDataQuality,
    is_valid_identifier,
    validate_company_data,
    validate_screening_request,
)  # Defined in validators.py

# Public API for the utilities package
__all__ = [
    "ApiClient",
    "StatusErrorTable",
    "get_logger",
    "CompanyDataQuality",
    "is_valid_identifier",
    "validate_company_data",
    "validate_screening_request",
]
