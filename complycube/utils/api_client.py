# complycube/utils/api_client.py

"""
Shared ComplyCube HTTP client.

Sends a single authenticated request with a bounded timeout and normalizes
both transport and application failures into an ``ApiResponse`` envelope.
The domain clients differ only in their configuration and in the table
used to turn a bare HTTP status into an error code.
"""

from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

import requests

from complycube.models.envelope import ApiErrorDetail, ApiResponse, ClientConfig
from complycube.utils.logger import get_logger

logger = get_logger("ApiClient")


COMMON_STATUS_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    429: "RATE_LIMITED",
    500: "INTERNAL_SERVER_ERROR",
    502: "BAD_GATEWAY",
    503: "SERVICE_UNAVAILABLE",
}

COMMON_STATUS_MESSAGES = {
    400: "Invalid request parameters",
    401: "Invalid or missing API key",
    403: "Access forbidden",
    429: "Rate limit exceeded",
    500: "Internal server error",
    502: "Bad gateway",
    503: "Service temporarily unavailable",
}


@dataclass(frozen=True)
class StatusErrorTable:
    """Maps an HTTP status without a structured error body to a code and message."""

    codes: Mapping[int, str] = field(default_factory=lambda: dict(COMMON_STATUS_CODES))
    messages: Mapping[int, str] = field(default_factory=lambda: dict(COMMON_STATUS_MESSAGES))

    @classmethod
    def with_not_found(cls, code: str, message: str) -> "StatusErrorTable":
        """Build the common table with a domain specific 404 entry."""
        return cls(
            codes={**COMMON_STATUS_CODES, 404: code},
            messages={**COMMON_STATUS_MESSAGES, 404: message},
        )

    def code_for(self, status: int) -> str:
        return self.codes.get(status, "HTTP_ERROR")

    def message_for(self, status: int) -> str:
        return self.messages.get(status, f"HTTP error {status}")


class ApiClient:
    """
    Performs ComplyCube API round trips and wraps the outcome in an envelope.

    Args:
        config: Immutable client configuration (API key, base URL, timeout).
        error_table: Status table used when the API returns no error body.
        session: Optional transport exposing ``request(method, url, **kwargs)``
            like ``requests.Session``. Defaults to the ``requests`` module,
            so calls share no connection state.
    """

    def __init__(
        self,
        config: ClientConfig,
        error_table: StatusErrorTable,
        session: Optional[Any] = None,
    ):
        self.config = config
        self.error_table = error_table
        self._transport = session if session is not None else requests

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": self.config.api_key,
            "Content-Type": "application/json",
            "User-Agent": self.config.user_agent,
        }

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[dict[str, Any]] = None,
        parse: Optional[Callable[[Any], Any]] = None,
    ) -> ApiResponse:
        """
        Send one request and return the envelope. Never raises.

        Args:
            method: HTTP method ("GET" or "POST").
            endpoint: Path relative to the base URL, already URL-encoded.
            params: Optional query parameters.
            body: Optional JSON body (sent for POST only).
            parse: Converts a successful JSON body into the response data.

        Returns:
            ApiResponse with ``data`` on 2xx, ``error`` otherwise.
        """
        url = f"{self.config.base_url}{endpoint}"
        logger.info(f"{method} {url}")

        try:
            response = self._send_within_deadline(method, url, params, body)

            if not 200 <= response.status_code < 300:
                error = self._parse_api_error(self._decode_error_body(response), response.status_code)
                logger.warning(
                    f"ComplyCube returned {response.status_code} for {method} {endpoint}: {error.code}"
                )
                return ApiResponse(status=response.status_code, error=error)

            payload = response.json() if response.content else None
            data = parse(payload) if parse is not None and payload is not None else payload
            return ApiResponse(status=response.status_code, data=data)

        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout calling {url}: {e}")
            return ApiResponse(
                status=408,
                error=ApiErrorDetail(
                    code="REQUEST_TIMEOUT",
                    message=f"Request timed out after {self.config.timeout_ms}ms",
                ),
            )
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Network error calling {url}: {e}")
            return ApiResponse(
                status=0,
                error=ApiErrorDetail(
                    code="NETWORK_ERROR",
                    message="Network error occurred. Please check your connection.",
                ),
            )
        except Exception as e:
            logger.error(f"Unexpected error calling {url}: {e}", exc_info=True)
            return ApiResponse(
                status=500,
                error=ApiErrorDetail(
                    code="UNKNOWN_ERROR",
                    message=str(e) or "An unexpected error occurred",
                    details={"original_error": repr(e)},
                ),
            )

    def _send_within_deadline(
        self,
        method: str,
        url: str,
        params: Optional[dict[str, Any]],
        body: Optional[dict[str, Any]],
    ) -> requests.Response:
        """
        Run the round trip in a worker and wait at most ``timeout_ms`` for the
        complete response, body included.

        The ``requests`` timeout only bounds the connect and each socket read,
        so a server trickling its body would otherwise never time out. On
        expiry the in-flight response is closed and ``Timeout`` is raised.
        """
        in_flight: list[requests.Response] = []

        def send() -> requests.Response:
            response = self._transport.request(
                method,
                url,
                headers=self.headers,
                params=params,
                json=body if method == "POST" else None,
                timeout=self.config.timeout_seconds,
                stream=True,
            )
            in_flight.append(response)
            response.content  # read the whole body inside the deadline
            return response

        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(send)
        try:
            return future.result(timeout=self.config.timeout_seconds)
        except FutureTimeoutError:
            future.cancel()
            for response in in_flight:
                response.close()
            raise requests.exceptions.Timeout(
                f"No complete response within {self.config.timeout_ms}ms"
            )
        finally:
            executor.shutdown(wait=False)

    @staticmethod
    def _decode_error_body(response: requests.Response) -> Any:
        """Error bodies are optional; an empty or non-JSON body decodes to None."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def _parse_api_error(self, body: Any, status: int) -> ApiErrorDetail:
        """Prefer the API's own error object, fall back to the status table."""
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            api_error = body["error"]
            details = api_error.get("details")
            return ApiErrorDetail(
                code=str(api_error.get("code") or "API_ERROR"),
                message=str(api_error.get("message") or "An API error occurred"),
                details=details if isinstance(details, dict) else None,
            )

        message = body.get("message") if isinstance(body, dict) else None
        return ApiErrorDetail(
            code=self.error_table.code_for(status),
            message=str(message) if message else self.error_table.message_for(status),
            details=body if isinstance(body, dict) and body else None,
        )
