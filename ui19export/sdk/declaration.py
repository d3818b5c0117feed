"""UI-19 declaration rendered as CSV in the layout of the official form.

This is the generic "download the declaration" export, as opposed to the
system-specific payloads in encoders.py:

    title
    SECTION 1: EMPLOYER DETAILS  (label,value rows)
    SECTION 2: EMPLOYEE DETAILS  (month, year, then columns A-J)
    DECLARATION                  (only when the report carries one)
"""

from typing import List

from .encoders import LINE_SEPARATOR, require_ui19_report
from .schemas import (
    MONTH_NAMES,
    UI19Report,
    non_contributor_reason_label,
    termination_reason_label,
)
from .transforms import (
    escape_delimited,
    format_currency_2dp,
    format_date_short_dmy,
    format_hours,
    optional_date,
)

TITLE = "UIF EMPLOYER'S DECLARATION - UI-19"

EMPLOYEE_COLUMNS = (
    "A: Surname",
    "B: Initials",
    "C: ID Number",
    "D: Gross Remuneration (R)",
    "E: Hours Worked",
    "F: Commencement Date",
    "G: Termination Date",
    "H: Termination Reason",
    "I: Contributor",
    "J: Non-Contributor Reason",
)


def _csv(value: str) -> str:
    return escape_delimited(value, ",")


def _pair(label: str, value) -> str:
    return f"{label},{_csv(value or '')}"


def _coded(code, label: str) -> str:
    if code is None:
        return ""
    return f"{code} - {label}"


def render_declaration_csv(report: UI19Report) -> str:
    """Render the full UI-19 form as comma-separated text (no BOM)."""
    require_ui19_report(report)

    employer = report.employer_details
    period = report.reporting_period
    lines: List[str] = []

    lines.append(TITLE)
    lines.append("")

    lines.append("SECTION 1: EMPLOYER DETAILS")
    lines.append(_pair("UIF Employer Reference No.", employer.uif_employer_reference))
    lines.append(_pair("PAYE Reference No.", employer.paye_reference))
    lines.append(_pair("Trading Name", employer.trading_name))
    lines.append(_pair("Physical Address", employer.physical_address.one_line()))
    if employer.postal_address is not None:
        lines.append(_pair("Postal Address", employer.postal_address.one_line()))
    lines.append(_pair("Company Registration No.", employer.company_registration_number))
    lines.append(_pair("Email", employer.email))
    lines.append(_pair("Phone", employer.phone))
    lines.append("")

    lines.append("SECTION 2: EMPLOYEE DETAILS")
    lines.append(f"Month,{MONTH_NAMES[period.month - 1]}")
    lines.append(f"Year,{period.year}")
    lines.append("")

    lines.append(",".join(EMPLOYEE_COLUMNS))
    for emp in report.employees:
        row = [
            _csv(emp.surname),
            _csv(emp.initials),
            _csv(emp.id_number),
            format_currency_2dp(emp.gross_remuneration),
            format_hours(emp.hours_worked),
            format_date_short_dmy(emp.commencement_date),
            optional_date(emp.termination_date, format_date_short_dmy),
            _csv(_coded(emp.termination_reason_code,
                        termination_reason_label(emp.termination_reason_code))),
            "YES" if emp.is_contributor else "NO",
            _csv(_coded(emp.non_contributor_reason_code,
                        non_contributor_reason_label(emp.non_contributor_reason_code))),
        ]
        lines.append(",".join(row))

    if report.declaration is not None:
        decl = report.declaration
        lines.append("")
        lines.append("DECLARATION")
        lines.append(_csv(decl.statement))
        lines.append("")
        lines.append(_pair("Authorised Person Name", decl.authorised_person_name))
        lines.append(_pair(
            "Signature Date",
            optional_date(decl.signature_date, format_date_short_dmy),
        ))

    return LINE_SEPARATOR.join(lines)
