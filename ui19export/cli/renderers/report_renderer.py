"""Rich renderer for canonical UI-19 reports.

Transforms a validated UI19Report into formatted Rich panels and tables.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ui19export.sdk.schemas import (
    UI19Report,
    non_contributor_reason_label,
    termination_reason_label,
)
from ui19export.sdk.transforms import format_date_dmy, optional_date


def render_report(console: Console, report: UI19Report) -> None:
    """Render employer details and the employee table.

    Args:
        console: Rich Console instance
        report: Validated report
    """
    _render_employer(console, report)
    _render_employees(console, report)
    _render_totals(console, report)


def _render_employer(console: Console, report: UI19Report) -> None:
    employer = report.employer_details

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value")

    table.add_row("Report", report.report_id)
    table.add_row("Period", report.reporting_period.label)
    table.add_row("Trading Name", employer.trading_name)
    table.add_row("UIF Reference", employer.uif_employer_reference)
    table.add_row("PAYE Reference", employer.paye_reference or "-")
    table.add_row("Registration No.", employer.company_registration_number)
    table.add_row("Address", employer.physical_address.one_line())

    console.print(Panel(table, title="UI-19 Employer Details", border_style="dim"))


def _render_employees(console: Console, report: UI19Report) -> None:
    table = Table(
        title=f"Employees ({report.total_employees})",
        box=box.ROUNDED,
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Surname")
    table.add_column("Initials")
    table.add_column("ID Number")
    table.add_column("Gross (R)", justify="right")
    table.add_column("Hours", justify="right")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Reason")
    table.add_column("UIF")

    for position, emp in enumerate(report.employees, start=1):
        if emp.is_contributor:
            uif = "[green]YES[/green]"
        else:
            label = non_contributor_reason_label(emp.non_contributor_reason_code)
            uif = f"[yellow]NO[/yellow] [dim]{label}[/dim]"

        reason = ""
        if emp.termination_reason_code is not None:
            reason = f"{emp.termination_reason_code} {termination_reason_label(emp.termination_reason_code)}"

        table.add_row(
            str(position),
            emp.surname,
            emp.initials,
            emp.id_number,
            f"{emp.gross_remuneration:,.2f}",
            f"{emp.hours_worked}",
            format_date_dmy(emp.commencement_date),
            optional_date(emp.termination_date, format_date_dmy) or "-",
            reason,
            uif,
        )

    console.print(table)


def _render_totals(console: Console, report: UI19Report) -> None:
    console.print(
        f"Contributors: [bold]{report.total_contributors}[/bold]   "
        f"Non-contributors: [bold]{report.total_non_contributors}[/bold]"
    )
