# complycube/main.py

"""
Command-line interface (CLI) entry point for the ComplyCube client.

Runs company lookups and AML screening checks and renders the results
with rich, or dumps the raw response envelope with --json.
"""
import asyncio

import click
from rich.console import Console
from rich.table import Table

from config.settings import Settings, get_settings
from complycube.analysis import analyze_screening_result, validate_company_data
from complycube.integrations.workflow import lookup_multiple_companies
from complycube.models.envelope import ApiResponse
from complycube.models.screening import (
    ScreeningCheckRequest,
    ScreeningCheckResult,
    ScreeningCheckType,
    ScreeningNameSearchMode,
    ScreeningOptions,
)
from complycube.services import CompanyLookupClient, ScreeningClient
from complycube.utils.logger import get_logger

logger = get_logger("CLI")
console = Console()


# --- Helper Functions for Output Formatting ---


def print_envelope_json(response: ApiResponse):
    console.print_json(response.model_dump_json(by_alias=True, exclude_none=True))


def print_error(response: ApiResponse):
    """Prints an error envelope and exits non-zero."""
    console.print(
        f"[bold red]{response.error.code}[/bold red] (status {response.status}): "
        f"{response.error.message}"
    )
    raise click.exceptions.Exit(1)


def has_data(response: ApiResponse) -> bool:
    """A 2xx with an empty body carries neither data nor error."""
    if response.data is None:
        console.print(f"[yellow]No data returned[/yellow] (status {response.status})")
        return False
    return True


def print_company_table(response: ApiResponse):
    company = response.data
    console.rule(f"[bold]{company.name or company.id}[/bold]", style="bold magenta")

    table = Table(show_header=True, header_style="bold blue", padding=(0, 1))
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("ID", company.id or "-")
    table.add_row("Registration Number", company.registration_number or "-")
    table.add_row("Country", company.incorporation_country or "-")
    table.add_row("Incorporated", company.incorporation_date or "-")
    status_color = "green" if company.active else "red"
    table.add_row("Active", f"[{status_color}]{company.active}[/]", end_section=True)

    quality = validate_company_data(company)
    if quality.missing_fields:
        table.add_row("Missing Fields", f"[red]{', '.join(quality.missing_fields)}[/red]")
    if quality.warnings:
        table.add_row("Warnings", f"[yellow]{', '.join(quality.warnings)}[/yellow]")

    console.print(table)


def print_screening_summary(result: ScreeningCheckResult):
    """Prints the screening outcome together with its risk analysis."""
    assessment = analyze_screening_result(result)
    risk_color = {"LOW": "green", "MEDIUM": "yellow"}.get(assessment.risk_level.value, "red")

    console.rule(f"[bold]Screening {result.id}[/bold]", style="bold magenta")
    table = Table(show_header=True, header_style="bold blue", padding=(0, 1))
    table.add_column("Metric", style="dim")
    table.add_column("Value")

    table.add_row("Client", result.client_id or "-")
    table.add_row("Type", result.type or "-")
    table.add_row("Outcome", f"[bold]{result.outcome}[/bold]")
    table.add_row("Risk Level", f"[{risk_color} bold]{assessment.risk_level.value}[/]", end_section=True)

    summary = result.breakdown.summary
    table.add_row("PEP Matches", str(summary.pep_matches))
    table.add_row("Watchlist Matches", str(summary.watchlist_matches))
    table.add_row("Adverse Media Matches", str(summary.adverse_media_matches))
    table.add_row("Total Matches", str(summary.total_matches), end_section=True)

    for recommendation in assessment.recommendations:
        table.add_row("Recommendation", recommendation)

    console.print(table)


def require_api_key(settings: Settings):
    if not settings.has_api_key():
        console.print("[bold red]Configuration Error:[/bold red] COMPLYCUBE_API_KEY is not set.")
        raise click.exceptions.Exit(1)


# --- CLI Command Group ---


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """ComplyCube company lookup and AML screening CLI."""
    ctx.obj = get_settings()


@cli.command()
@click.argument("company_id")
@click.option("--json", "as_json", is_flag=True, help="Print the raw response envelope.")
@click.pass_obj
def lookup(settings: Settings, company_id: str, as_json: bool):
    """Look up a company by its ComplyCube ID."""
    require_api_key(settings)
    response = CompanyLookupClient.from_settings(settings).get_company_details(company_id)

    if as_json:
        print_envelope_json(response)
    if response.error:
        print_error(response)
    if not as_json and has_data(response):
        print_company_table(response)


@cli.command(name="lookup-batch")
@click.argument("company_ids", nargs=-1, required=True)
@click.pass_obj
def lookup_batch(settings: Settings, company_ids: tuple[str, ...]):
    """Look up several companies concurrently."""
    require_api_key(settings)
    client = CompanyLookupClient.from_settings(settings)
    batch = asyncio.run(lookup_multiple_companies(client, list(company_ids)))

    table = Table(title="Batch Lookup", show_header=True, header_style="bold blue")
    table.add_column("Company ID")
    table.add_column("Result")
    for success in batch.successful:
        table.add_row(success.company_id, f"[green]{success.data.name}[/green]")
    for failure in batch.failed:
        table.add_row(failure.company_id, f"[red]{failure.error.code}[/red]: {failure.error.message}")
    console.print(table)

    console.print(
        f"Retrieved [green]{len(batch.successful)}[/green], failed [red]{len(batch.failed)}[/red]"
    )


@cli.command()
@click.option("--client-id", required=True, help="ComplyCube client ID to screen.")
@click.option(
    "--type",
    "check_type",
    type=click.Choice([t.value for t in ScreeningCheckType]),
    default=ScreeningCheckType.STANDARD.value,
    help="Screening check type.",
)
@click.option(
    "--search-mode",
    type=click.Choice([m.value for m in ScreeningNameSearchMode]),
    default=None,
    help="Name matching strategy.",
)
@click.option("--monitoring/--no-monitoring", default=False, help="Enable ongoing monitoring.")
@click.option("--json", "as_json", is_flag=True, help="Print the raw response envelope.")
@click.pass_obj
def screen(
    settings: Settings,
    client_id: str,
    check_type: str,
    search_mode: str,
    monitoring: bool,
    as_json: bool,
):
    """
    Creates an AML/PEP screening check for a client.
    """
    require_api_key(settings)
    request = ScreeningCheckRequest(
        client_id=client_id,
        type=check_type,
        enable_monitoring=monitoring,
        options=ScreeningOptions(screening_name_search_mode=search_mode) if search_mode else None,
    )

    logger.info(f"Starting {check_type} for client {client_id}")
    response = ScreeningClient.from_settings(settings).create_screening_check(request)

    if as_json:
        print_envelope_json(response)
    if response.error:
        print_error(response)
    if not as_json and has_data(response):
        print_screening_summary(response.data)


@cli.command()
@click.argument("check_id")
@click.option("--json", "as_json", is_flag=True, help="Print the raw response envelope.")
@click.pass_obj
def check(settings: Settings, check_id: str, as_json: bool):
    """Fetch an existing screening check."""
    require_api_key(settings)
    response = ScreeningClient.from_settings(settings).get_screening_check(check_id)

    if as_json:
        print_envelope_json(response)
    if response.error:
        print_error(response)
    if not as_json and has_data(response):
        print_screening_summary(response.data)


@cli.command()
@click.option("--client-id", default=None, help="Only list checks for this client.")
@click.option("--limit", type=int, default=None, help="Maximum number of checks.")
@click.option("--json", "as_json", is_flag=True, help="Print the raw response envelope.")
@click.pass_obj
def checks(settings: Settings, client_id: str, limit: int, as_json: bool):
    """List screening checks."""
    require_api_key(settings)
    response = ScreeningClient.from_settings(settings).list_screening_checks(client_id, limit)

    if as_json:
        print_envelope_json(response)
    if response.error:
        print_error(response)
    if as_json or not has_data(response):
        return

    table = Table(title=f"{len(response.data)} screening checks", header_style="bold blue")
    table.add_column("ID")
    table.add_column("Type")
    table.add_column("Outcome")
    table.add_column("Created")
    for result in response.data:
        table.add_row(result.id or "-", result.type or "-", result.outcome, result.created_at or "-")
    console.print(table)


# --- Main Execution ---

if __name__ == "__main__":
    cli()
