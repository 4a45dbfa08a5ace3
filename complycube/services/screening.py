# complycube/services/screening.py

"""
AML/PEP screening client.

Creates, fetches and lists screening checks through the ``/checks``
endpoints. Screening runs server-side, so the default timeout is longer
than the company lookup one.
"""

from typing import Any, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from complycube.models.envelope import ApiErrorDetail, ApiResponse, ClientConfig
from complycube.models.screening import ScreeningCheckRequest, ScreeningCheckResult
from complycube.utils.api_client import ApiClient, StatusErrorTable
from complycube.utils.logger import get_logger
from complycube.utils.validators import is_valid_identifier, validate_screening_request
from config.settings import DEFAULT_BASE_URL, Settings, get_settings

logger = get_logger("ScreeningClient")

SCREENING_ERROR_TABLE = StatusErrorTable.with_not_found(
    "CHECK_NOT_FOUND", "Screening check not found"
)


def _invalid_request(errors: list[str]) -> ApiResponse:
    return ApiResponse(
        status=400,
        error=ApiErrorDetail(
            code="INVALID_REQUEST",
            message=f"Invalid screening request: {', '.join(errors)}",
        ),
    )


def _parse_check_list(payload: Any) -> list[ScreeningCheckResult]:
    """The list endpoint may return a bare array or a paginated ``items`` object."""
    if isinstance(payload, dict) and "items" in payload:
        payload = payload["items"]
    return [ScreeningCheckResult.model_validate(item) for item in payload]


class ScreeningClient:
    """
    Runs AML and PEP screening checks against ComplyCube.

    Args:
        api_key: ComplyCube API key.
        base_url: API base URL.
        timeout_ms: Request timeout in milliseconds.
        user_agent: User-Agent header value.
        session: Optional transport, mainly for tests.
    """

    DEFAULT_TIMEOUT_MS = 30000

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        user_agent: str = "Design-Studio-AML/1.0",
        session: Optional[Any] = None,
    ):
        self.config = ClientConfig(
            api_key=api_key,
            base_url=base_url,
            timeout_ms=timeout_ms,
            user_agent=user_agent,
        )
        self._api = ApiClient(self.config, SCREENING_ERROR_TABLE, session=session)

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, session: Optional[Any] = None
    ) -> "ScreeningClient":
        settings = settings or get_settings()
        return cls(
            api_key=settings.complycube_api_key or "",
            base_url=settings.complycube_base_url,
            timeout_ms=settings.screening_timeout_ms,
            user_agent=settings.screening_user_agent,
            session=session,
        )

    def create_screening_check(
        self, request: Union[ScreeningCheckRequest, dict[str, Any]]
    ) -> ApiResponse[ScreeningCheckResult]:
        """
        Create an AML screening check.

        Args:
            request: A ScreeningCheckRequest, or a dict in the API's camelCase
                wire format.

        Returns:
            ApiResponse with the created ScreeningCheckResult. Invalid requests
            come back as 400 INVALID_REQUEST without contacting the API.
        """
        if isinstance(request, BaseModel):
            payload = request.model_dump(by_alias=True, exclude_none=True, mode="json")
        elif isinstance(request, dict):
            payload = dict(request)
        else:
            return _invalid_request(["request must be a ScreeningCheckRequest or a dict"])

        errors = validate_screening_request(payload)
        if errors:
            return _invalid_request(errors)

        try:
            body = ScreeningCheckRequest.model_validate(payload).to_wire()
        except ValidationError as e:
            return _invalid_request(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            )

        logger.info(f"Creating {body['type']} for client {body['clientId']}")
        return self._api.request(
            "POST", "/checks", body=body, parse=ScreeningCheckResult.model_validate
        )

    def get_screening_check(self, check_id: Optional[str]) -> ApiResponse[ScreeningCheckResult]:
        """
        Get a screening check result by ID.

        Args:
            check_id: The unique identifier for the screening check.
        """
        if not is_valid_identifier(check_id):
            return ApiResponse(
                status=400,
                error=ApiErrorDetail(
                    code="INVALID_CHECK_ID",
                    message="Check ID is required and must be a string",
                ),
            )

        return self._api.request(
            "GET",
            f"/checks/{quote(check_id, safe='')}",
            parse=ScreeningCheckResult.model_validate,
        )

    def list_screening_checks(
        self, client_id: Optional[str] = None, limit: Optional[int] = None
    ) -> ApiResponse[list[ScreeningCheckResult]]:
        """
        List screening checks, optionally filtered by client.

        Args:
            client_id: Only return checks for this client.
            limit: Maximum number of results to return.
        """
        params: dict[str, Any] = {}
        if client_id:
            params["clientId"] = client_id
        if limit:
            params["limit"] = str(limit)

        return self._api.request("GET", "/checks", params=params, parse=_parse_check_list)
