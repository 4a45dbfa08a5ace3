# complycube/services/company_lookup.py

"""
Company lookup client.

Resolves a ComplyCube company identifier to a structured company record
via ``GET /lookup/companies/{id}``.
"""

from typing import Any, Optional
from urllib.parse import quote

from complycube.models.company import CompanyRecord
from complycube.models.envelope import ApiErrorDetail, ApiResponse, ClientConfig
from complycube.utils.api_client import ApiClient, StatusErrorTable
from complycube.utils.logger import get_logger
from complycube.utils.validators import is_valid_identifier
from config.settings import DEFAULT_BASE_URL, Settings, get_settings

logger = get_logger("CompanyLookupClient")

COMPANY_ERROR_TABLE = StatusErrorTable.with_not_found("COMPANY_NOT_FOUND", "Company not found")


class CompanyLookupClient:
    """
    Retrieves company details from ComplyCube.

    Args:
        api_key: ComplyCube API key.
        base_url: API base URL.
        timeout_ms: Request timeout in milliseconds.
        user_agent: User-Agent header value.
        session: Optional transport, mainly for tests.
    """

    DEFAULT_TIMEOUT_MS = 10000

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        user_agent: str = "Design-Studio/1.0",
        session: Optional[Any] = None,
    ):
        self.config = ClientConfig(
            api_key=api_key,
            base_url=base_url,
            timeout_ms=timeout_ms,
            user_agent=user_agent,
        )
        self._api = ApiClient(self.config, COMPANY_ERROR_TABLE, session=session)

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, session: Optional[Any] = None
    ) -> "CompanyLookupClient":
        settings = settings or get_settings()
        return cls(
            api_key=settings.complycube_api_key or "",
            base_url=settings.complycube_base_url,
            timeout_ms=settings.lookup_timeout_ms,
            user_agent=settings.lookup_user_agent,
            session=session,
        )

    def get_company_details(self, company_id: Optional[str]) -> ApiResponse[CompanyRecord]:
        """
        Get company details by ID.

        Args:
            company_id: The unique identifier for the company.

        Returns:
            ApiResponse with a CompanyRecord, or an error envelope. Never raises.
        """
        if not is_valid_identifier(company_id):
            return ApiResponse(
                status=400,
                error=ApiErrorDetail(
                    code="INVALID_COMPANY_ID",
                    message="Company ID is required and must be a string",
                ),
            )

        logger.info(f"Looking up company {company_id}")
        return self._api.request(
            "GET",
            f"/lookup/companies/{quote(company_id, safe='')}",
            parse=CompanyRecord.model_validate,
        )
