# complycube/integrations/workflow.py

"""
Workflow integration helpers.

Reshape lookup results into the workflow designer's company format, map
error codes onto workflow statuses, and fan out batch lookups.
"""

import asyncio
from typing import Any, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from complycube.models.company import CompanyRecord
from complycube.models.envelope import ApiErrorDetail
from complycube.services.company_lookup import CompanyLookupClient
from complycube.utils.logger import get_logger
from complycube.utils.validators import validate_company_data

logger = get_logger("WorkflowIntegration")

WorkflowStatus = Literal["success", "not_found", "auth_error", "rate_limited", "error"]

_ERROR_STATUS: dict[str, tuple[str, str]] = {
    "COMPANY_NOT_FOUND": ("not_found", "Company not found in database"),
    "UNAUTHORIZED": ("auth_error", "Please check your API credentials"),
    "RATE_LIMITED": ("rate_limited", "Please retry after some time"),
}


class WorkflowOutcome(BaseModel):
    """Result handed back to the workflow engine for a company lookup."""

    status: WorkflowStatus
    message: Optional[str] = None
    data: Optional[dict[str, Any]] = None
    raw_data: Optional[CompanyRecord] = None


class LookupSuccess(BaseModel):
    company_id: str
    data: CompanyRecord


class LookupFailure(BaseModel):
    company_id: str
    error: ApiErrorDetail


class BatchLookupResult(BaseModel):
    successful: list[LookupSuccess] = Field(default_factory=list)
    failed: list[LookupFailure] = Field(default_factory=list)


def to_workflow_format(company: CompanyRecord) -> dict[str, Any]:
    """
    Transform a company record into the workflow designer's format.

    An absent ``active`` flag is reported as active here, while
    ``validate_company_data`` still lists it as a warning.
    """
    address = company.address
    return {
        "companyInfo": {
            "id": company.id,
            "name": company.name,
            "registrationNumber": company.registration_number,
            "country": company.incorporation_country,
            "incorporationDate": company.incorporation_date,
            "isActive": company.active if company.active is not None else True,
            "type": company.incorporation_type,
        },
        "address": {
            "street": address.street,
            "city": address.city,
            "state": address.state,
            "postalCode": address.postal_code,
            "country": address.country,
        } if address else None,
        "stakeholders": {
            "owners": [
                {
                    "name": owner.name,
                    "shareholding": owner.shareholding,
                    "appointmentDate": owner.appointment_date,
                }
                for owner in company.owners or []
            ],
            "officers": [
                {
                    "name": officer.name,
                    "role": officer.role,
                    "appointmentDate": officer.appointment_date,
                }
                for officer in company.officers or []
            ],
        },
        "compliance": {
            "sourceUrl": company.source_url,
            "lastUpdated": company.updated_at,
            "dataQuality": validate_company_data(company).model_dump(),
        },
    }


def integrate_company_lookup(client: CompanyLookupClient, company_id: str) -> WorkflowOutcome:
    """Look up a company and translate the envelope into a workflow outcome."""
    result = client.get_company_details(company_id)

    if result.error:
        status, message = _ERROR_STATUS.get(result.error.code, ("error", result.error.message))
        return WorkflowOutcome(status=status, message=message)

    if result.data is None:
        return WorkflowOutcome(status="error", message="No data returned")

    return WorkflowOutcome(
        status="success",
        data=to_workflow_format(result.data),
        raw_data=result.data,
    )


async def lookup_multiple_companies(
    client: CompanyLookupClient, company_ids: Sequence[str]
) -> BatchLookupResult:
    """
    Look up several companies concurrently.

    Each lookup runs independently in a worker thread; one failing does not
    affect the others. Results are reported in input order.
    """
    logger.info(f"Looking up {len(company_ids)} companies")

    outcomes = await asyncio.gather(
        *(asyncio.to_thread(client.get_company_details, cid) for cid in company_ids),
        return_exceptions=True,
    )

    batch = BatchLookupResult()
    for company_id, outcome in zip(company_ids, outcomes):
        if isinstance(outcome, BaseException):
            batch.failed.append(LookupFailure(
                company_id=company_id,
                error=ApiErrorDetail(code="REQUEST_FAILED", message=str(outcome)),
            ))
        elif outcome.error or outcome.data is None:
            batch.failed.append(LookupFailure(
                company_id=company_id,
                error=outcome.error or ApiErrorDetail(code="NO_DATA", message="No data returned"),
            ))
        else:
            batch.successful.append(LookupSuccess(company_id=company_id, data=outcome.data))

    logger.info(
        f"Batch lookup finished: {len(batch.successful)} retrieved, {len(batch.failed)} failed"
    )
    return batch
