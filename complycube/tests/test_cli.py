import json

import pytest
from click.testing import CliRunner

from complycube import main
from complycube.models.company import CompanyRecord
from complycube.models.envelope import ApiErrorDetail, ApiResponse
from complycube.models.screening import ScreeningCheckResult
from complycube.services import CompanyLookupClient, ScreeningClient
from config.settings import Settings


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def configured(mocker):
    settings = Settings(_env_file=None, complycube_api_key="test-key")
    mocker.patch("complycube.main.get_settings", return_value=settings)
    return settings


def test_lookup_prints_company(runner, configured, mocker):
    mocker.patch.object(
        CompanyLookupClient,
        "get_company_details",
        return_value=ApiResponse(status=200, data=CompanyRecord(id="1", name="Acme", active=True)),
    )

    result = runner.invoke(main.cli, ["lookup", "1"])

    assert result.exit_code == 0, result.output
    assert "Acme" in result.output
    assert "registrationNumber" in result.output


def test_lookup_json_dumps_envelope(runner, configured, mocker):
    mocker.patch.object(
        CompanyLookupClient,
        "get_company_details",
        return_value=ApiResponse(
            status=200, data=CompanyRecord(id="1", name="Acme", registration_number="99")
        ),
    )

    result = runner.invoke(main.cli, ["lookup", "1", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["status"] == 200
    assert payload["data"]["registrationNumber"] == "99"


def test_lookup_error_exits_non_zero(runner, configured, mocker):
    mocker.patch.object(
        CompanyLookupClient,
        "get_company_details",
        return_value=ApiResponse(
            status=404, error=ApiErrorDetail(code="COMPANY_NOT_FOUND", message="Company not found")
        ),
    )

    result = runner.invoke(main.cli, ["lookup", "nope"])

    assert result.exit_code == 1
    assert "COMPANY_NOT_FOUND" in result.output


def test_missing_api_key(runner, mocker):
    mocker.patch("complycube.main.get_settings", return_value=Settings(_env_file=None, complycube_api_key=""))

    result = runner.invoke(main.cli, ["lookup", "1"])

    assert result.exit_code == 1
    assert "COMPLYCUBE_API_KEY" in result.output


def test_screen_prints_risk(runner, configured, mocker, screening_body):
    create = mocker.patch.object(
        ScreeningClient,
        "create_screening_check",
        return_value=ApiResponse(status=201, data=ScreeningCheckResult.model_validate(screening_body)),
    )

    result = runner.invoke(
        main.cli,
        ["screen", "--client-id", "client-123", "--type", "extensive_screening_check", "--search-mode", "fuzzy"],
    )

    assert result.exit_code == 0, result.output
    assert "CRITICAL" in result.output
    request = create.call_args.args[0]
    assert request.client_id == "client-123"
    assert request.type == "extensive_screening_check"
    assert request.options.screening_name_search_mode == "fuzzy"


def test_check_and_checks(runner, configured, mocker, screening_body):
    check = ScreeningCheckResult.model_validate(screening_body)
    mocker.patch.object(ScreeningClient, "get_screening_check", return_value=ApiResponse(status=200, data=check))
    listing = mocker.patch.object(
        ScreeningClient, "list_screening_checks", return_value=ApiResponse(status=200, data=[check])
    )

    single = runner.invoke(main.cli, ["check", "chk_001"])
    many = runner.invoke(main.cli, ["checks", "--client-id", "client-123", "--limit", "5"])

    assert single.exit_code == 0, single.output
    assert "chk_001" in single.output
    assert many.exit_code == 0, many.output
    assert "chk_001" in many.output
    listing.assert_called_once_with("client-123", 5)


def test_lookup_batch(runner, configured, mocker):
    def fake_lookup(self, company_id):
        if company_id == "bad":
            return ApiResponse(status=0, error=ApiErrorDetail(code="NETWORK_ERROR", message="down"))
        return ApiResponse(status=200, data=CompanyRecord(id=company_id, name="Acme"))

    mocker.patch.object(CompanyLookupClient, "get_company_details", fake_lookup)

    result = runner.invoke(main.cli, ["lookup-batch", "good", "bad"])

    assert result.exit_code == 0, result.output
    assert "NETWORK_ERROR" in result.output
    assert "Retrieved 1" in result.output


@pytest.mark.parametrize(
    "method, args",
    [
        (CompanyLookupClient.get_company_details, ["lookup", "1"]),
        (ScreeningClient.create_screening_check, ["screen", "--client-id", "client-123"]),
        (ScreeningClient.get_screening_check, ["check", "chk_001"]),
        (ScreeningClient.list_screening_checks, ["checks"]),
    ],
)
def test_empty_success_body_prints_no_data(runner, configured, mocker, method, args):
    owner = CompanyLookupClient if method is CompanyLookupClient.get_company_details else ScreeningClient
    mocker.patch.object(owner, method.__name__, return_value=ApiResponse(status=204))

    result = runner.invoke(main.cli, args)

    assert result.exit_code == 0, result.output
    assert "No data returned" in result.output
    assert "204" in result.output
