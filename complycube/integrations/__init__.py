# complycube/integrations/__init__.py

"""
Adapters between the ComplyCube clients and workflow hosts.
"""

from .capabilities import (
    AML_SCREENING,
    CAPABILITIES,
    COMPANY_LOOKUP,
    PROOF_OF_ADDRESS_CHECK,
    CapabilityDescriptor,
    company_lookup_branch,
    run_aml_screening,
    run_company_lookup,
    screening_branch,
)
from .workflow import (
    BatchLookupResult,
    WorkflowOutcome,
    integrate_company_lookup,
    lookup_multiple_companies,
    to_workflow_format,
)

__all__ = [
    "AML_SCREENING",
    "CAPABILITIES",
    "COMPANY_LOOKUP",
    "PROOF_OF_ADDRESS_CHECK",
    "CapabilityDescriptor",
    "company_lookup_branch",
    "run_aml_screening",
    "run_company_lookup",
    "screening_branch",
    "BatchLookupResult",
    "WorkflowOutcome",
    "integrate_company_lookup",
    "lookup_multiple_companies",
    "to_workflow_format",
]
