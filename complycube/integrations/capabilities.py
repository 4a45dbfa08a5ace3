# complycube/integrations/capabilities.py

"""
Capability descriptors for workflow hosts.

A descriptor declares what a node looks like to the host (name, category,
output branches, settings fields bound to attribute paths). The runner
functions translate node attributes into client calls and pick the output
branch from the returned envelope. Host-specific rendering is left to the
host adapter.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from complycube.models.company import CompanyRecord
from complycube.models.envelope import ApiResponse
from complycube.models.screening import (
    ScreeningCheckResult,
    ScreeningCheckType,
    ScreeningNameSearchMode,
    ScreeningOutcome,
)
from complycube.services.company_lookup import CompanyLookupClient
from complycube.services.screening import ScreeningClient


class OutputBranch(BaseModel):
    name: str
    display_name: str
    color: str


class SettingsChoice(BaseModel):
    value: str
    label: str


class SettingsField(BaseModel):
    """Editor field bound to an attribute path such as ``attributes.companyId``."""

    name: str
    label: str
    placeholder: Optional[str] = None
    choices: list[SettingsChoice] = Field(default_factory=list)


class CapabilityDescriptor(BaseModel):
    name: str
    display_name: str
    description: str
    category: str = "Compliance"
    output_branches: list[OutputBranch]
    settings_fields: list[SettingsField]
    workflow_template: str = "./workflow/main.wf"
    initial_attributes: dict[str, Any] = Field(default_factory=dict)

    @property
    def branch_names(self) -> list[str]:
        return [b.name for b in self.output_branches]


COMPANY_LOOKUP = CapabilityDescriptor(
    name="CompanyLookup",
    display_name="Company Lookup",
    description="Retrieve detailed company information using ComplyCube",
    output_branches=[
        OutputBranch(name="success", display_name="Found", color="green"),
        OutputBranch(name="not_found", display_name="Not Found", color="orange"),
        OutputBranch(name="error", display_name="Error", color="red"),
    ],
    settings_fields=[
        SettingsField(
            name="attributes.companyId",
            label="Company ID",
            placeholder="Enter the ComplyCube company ID",
        ),
    ],
    initial_attributes={
        "uri": "company-lookup",
        "name": "Company Lookup",
        "description": "Retrieve detailed company information using ComplyCube",
    },
)

AML_SCREENING = CapabilityDescriptor(
    name="AMLScreening",
    display_name="AML Screening",
    description="Perform AML and PEP screening using ComplyCube",
    output_branches=[
        OutputBranch(name="clear", display_name="Clear", color="green"),
        OutputBranch(name="attention", display_name="Needs Attention", color="orange"),
        OutputBranch(name="not_processed", display_name="Not Processed", color="orange"),
        OutputBranch(name="error", display_name="Error", color="red"),
    ],
    settings_fields=[
        SettingsField(
            name="attributes.clientId",
            label="Client ID",
            placeholder="Enter the client ID to screen",
        ),
        SettingsField(
            name="attributes.screeningType",
            label="Screening Type",
            choices=[
                SettingsChoice(value=ScreeningCheckType.STANDARD.value, label="Standard Screening"),
                SettingsChoice(value=ScreeningCheckType.EXTENSIVE.value, label="Extensive Screening"),
            ],
        ),
        SettingsField(
            name="attributes.searchMode",
            label="Search Mode",
            choices=[
                SettingsChoice(value=ScreeningNameSearchMode.FUZZY.value, label="Fuzzy Matching"),
                SettingsChoice(value=ScreeningNameSearchMode.PRECISE.value, label="Precise Matching"),
            ],
        ),
    ],
    initial_attributes={
        "uri": "aml-screening",
        "name": "AML Screening",
        "description": "Perform AML and PEP screening using ComplyCube",
    },
)

# Declared for hosts only. There is no document verification client, so no
# runner selects among these branches.
PROOF_OF_ADDRESS_CHECK = CapabilityDescriptor(
    name="ProofOfAddressCheck",
    display_name="Proof of Address Check",
    description="Verify proof of address documents using ComplyCube",
    output_branches=[
        OutputBranch(name="success", display_name="Verified", color="green"),
        OutputBranch(name="review", display_name="Needs Review", color="orange"),
        OutputBranch(name="failed", display_name="Failed", color="red"),
        OutputBranch(name="error", display_name="Error", color="red"),
    ],
    settings_fields=[
        SettingsField(
            name="attributes.clientId",
            label="Client ID",
            placeholder="Enter the ComplyCube client ID",
        ),
        SettingsField(
            name="attributes.documentId",
            label="Document ID",
            placeholder="Enter the document ID to verify",
        ),
    ],
    initial_attributes={
        "uri": "proof-of-address-check",
        "name": "Proof of Address Check",
        "description": "Verify proof of address documents using ComplyCube",
    },
)

CAPABILITIES: dict[str, CapabilityDescriptor] = {
    COMPANY_LOOKUP.name: COMPANY_LOOKUP,
    AML_SCREENING.name: AML_SCREENING,
    PROOF_OF_ADDRESS_CHECK.name: PROOF_OF_ADDRESS_CHECK,
}


def company_lookup_branch(response: ApiResponse[CompanyRecord]) -> str:
    if response.error:
        return "not_found" if response.error.code == "COMPANY_NOT_FOUND" else "error"
    return "success" if response.data is not None else "error"


def screening_branch(response: ApiResponse[ScreeningCheckResult]) -> str:
    if response.error or response.data is None:
        return "error"
    outcome = response.data.outcome
    if outcome in [o.value for o in ScreeningOutcome]:
        return outcome
    return "error"


def run_company_lookup(
    client: CompanyLookupClient, attributes: dict[str, Any]
) -> tuple[str, ApiResponse[CompanyRecord]]:
    """Run a Company Lookup node. Returns the output branch and the envelope."""
    response = client.get_company_details(attributes.get("companyId"))
    return company_lookup_branch(response), response


def run_aml_screening(
    client: ScreeningClient, attributes: dict[str, Any]
) -> tuple[str, ApiResponse[ScreeningCheckResult]]:
    """Run an AML Screening node. Returns the output branch and the envelope."""
    request: dict[str, Any] = {
        "clientId": attributes.get("clientId"),
        "type": attributes.get("screeningType") or ScreeningCheckType.STANDARD.value,
    }
    if attributes.get("searchMode"):
        request["options"] = {"screeningNameSearchMode": attributes["searchMode"]}

    response = client.create_screening_check(request)
    return screening_branch(response), response
