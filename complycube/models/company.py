# complycube/models/company.py

"""
Pydantic models for the ComplyCube company lookup record.

Attributes are snake_case; the wire format is camelCase. Unknown wire
fields are kept so a record dumped with ``by_alias=True`` matches the
API response it was parsed from.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for every model exchanged with the ComplyCube API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class CompanyAddress(WireModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class CompanyOwner(WireModel):
    id: Optional[str] = None
    name: Optional[str] = None
    shareholding: Optional[float] = None
    appointment_date: Optional[str] = None


class CompanyOfficer(WireModel):
    id: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    appointment_date: Optional[str] = None


class CompanyFiling(WireModel):
    id: Optional[str] = None
    type: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None


class IndustryCode(WireModel):
    code: Optional[str] = None
    description: Optional[str] = None
    system: Optional[str] = None


class CompanyRecord(WireModel):
    """Company details returned by ``GET /lookup/companies/{id}``."""

    # id and name are required by the API contract but kept optional here so
    # incomplete records can still be inspected with validate_company_data.
    id: Optional[str] = Field(default=None, description="ComplyCube company identifier.")
    name: Optional[str] = Field(default=None, description="Registered company name.")
    registration_number: Optional[str] = None
    incorporation_country: Optional[str] = Field(
        default=None, description="ISO 3166 alpha-2 country of incorporation."
    )
    incorporation_date: Optional[str] = None
    incorporation_type: Optional[str] = None
    address: Optional[CompanyAddress] = None
    active: Optional[bool] = None
    source_url: Optional[str] = Field(
        default=None, description="Registry page the record was sourced from."
    )
    owners: Optional[list[CompanyOwner]] = None
    officers: Optional[list[CompanyOfficer]] = None
    filings: Optional[list[CompanyFiling]] = None
    industry_codes: Optional[list[IndustryCode]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
