import json

import pytest
import requests

# --- Fixtures and Helpers ---


def build_response(status: int, body=None, raw: bytes = None) -> requests.Response:
    """Builds a real requests.Response carrying a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status
    response.headers["Content-Type"] = "application/json"
    if raw is not None:
        response._content = raw
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def mock_session(mocker):
    """Transport mock injected into the clients in place of requests."""
    return mocker.MagicMock()


@pytest.fixture
def company_body() -> dict:
    return {
        "id": "5f3a1c",
        "name": "Acme Holdings Ltd",
        "registrationNumber": "01234567",
        "incorporationCountry": "GB",
        "incorporationDate": "2001-04-12",
        "incorporationType": "Private Limited Company",
        "address": {
            "street": "1 High Street",
            "city": "London",
            "postalCode": "EC1A 1AA",
            "country": "GB",
        },
        "active": True,
        "sourceUrl": "https://find-and-update.company-information.service.gov.uk/company/01234567",
        "owners": [{"name": "Jane Doe", "shareholding": 75, "appointmentDate": "2001-04-12"}],
        "officers": [{"name": "John Roe", "role": "director", "appointmentDate": "2010-01-01"}],
        "filings": [{"type": "annual_return", "date": "2023-05-01"}],
        "industryCodes": [{"code": "64209", "system": "SIC"}],
        "createdAt": "2024-01-01T10:00:00.000Z",
        "updatedAt": "2024-02-01T10:00:00.000Z",
    }


@pytest.fixture
def screening_body() -> dict:
    return {
        "id": "chk_001",
        "clientId": "client-123",
        "type": "standard_screening_check",
        "outcome": "attention",
        "breakdown": {
            "summary": {
                "watchlistMatches": 0,
                "pepMatches": 1,
                "adverseMediaMatches": 0,
                "totalMatches": 1,
            },
            "matches": [
                {
                    "id": "m1",
                    "name": "Jane Doe",
                    "confidence": 0.9,
                    "category": "pep",
                    "pepLevel": "1",
                }
            ],
        },
        "enableMonitoring": False,
        "createdAt": "2024-03-01T09:00:00.000Z",
    }
