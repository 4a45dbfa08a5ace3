# complycube/utils/validators.py

"""
Data validation functions.

Local checks run before any request is sent, and the data-quality check
applied to company records returned by the lookup endpoint.
"""

from typing import Any, Union

from pydantic import BaseModel, Field

from complycube.models.company import CompanyRecord
from complycube.models.screening import ScreeningCheckType, ScreeningNameSearchMode
from complycube.utils.logger import get_logger

logger = get_logger("Validators")


class CompanyDataQuality(BaseModel):
    """Completeness report for a company record."""

    is_valid: bool
    missing_fields: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


def is_valid_identifier(value: Any) -> bool:
    """True for a non-empty string identifier."""
    return isinstance(value, str) and bool(value)


def validate_screening_request(payload: dict[str, Any]) -> list[str]:
    """
    Collects every violation in a wire-format screening request.

    Args:
        payload: Request body using the API's camelCase keys.

    Returns:
        List of human-readable violations; empty when the request is valid.
    """
    errors: list[str] = []

    if not is_valid_identifier(payload.get("clientId")):
        errors.append("clientId is required and must be a string")

    check_types = [t.value for t in ScreeningCheckType]
    if payload.get("type") not in check_types:
        errors.append('type must be either "standard_screening_check" or "extensive_screening_check"')

    options = payload.get("options") or {}
    search_mode = options.get("screeningNameSearchMode") if isinstance(options, dict) else None
    if search_mode and search_mode not in [m.value for m in ScreeningNameSearchMode]:
        errors.append('screeningNameSearchMode must be either "fuzzy" or "precise"')

    if errors:
        logger.info(f"Screening request rejected locally: {errors}")
    return errors


def validate_company_data(company: Union[CompanyRecord, dict[str, Any]]) -> CompanyDataQuality:
    """
    Checks a company record for missing required and important fields.

    ``id`` and ``name`` are required; a missing registration number,
    incorporation country or activity flag is only a warning. The input
    is not modified.
    """
    record = company if isinstance(company, CompanyRecord) else CompanyRecord.model_validate(company)

    missing_fields: list[str] = []
    warnings: list[str] = []

    if not record.id:
        missing_fields.append("id")
    if not record.name:
        missing_fields.append("name")

    if not record.registration_number:
        warnings.append("registrationNumber")
    if not record.incorporation_country:
        warnings.append("incorporationCountry")
    if record.active is None:
        warnings.append("active status")

    return CompanyDataQuality(
        is_valid=not missing_fields,
        missing_fields=missing_fields,
        warnings=warnings,
    )
