"""Encoder dispatcher: canonical UI-19 report -> target system text payload.

Every encoder is a pure function of the report. Lines are joined with a
single '\\n' and there is no trailing newline. Nothing here reads the clock;
only the filename carries a timestamp (see filenames.py).
"""

import logging
from typing import List

from .errors import ReportTypeMismatchError
from .formats import DELIMITED, ENVELOPE, FIXED_WIDTH, FormatSpec, get_format_spec
from .schemas import UI19_REPORT_TYPE, UI19Report
from .transforms import escape_delimited, pad_or_truncate

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


def require_ui19_report(report) -> None:
    report_type = getattr(report, "report_type", None)
    if report_type != UI19_REPORT_TYPE:
        raise ReportTypeMismatchError(report_type, UI19_REPORT_TYPE)


def _delimited_line(values, delimiter: str) -> str:
    return delimiter.join(escape_delimited(v, delimiter) for v in values)


def _encode_delimited(report: UI19Report, spec: FormatSpec) -> str:
    lines: List[str] = []
    if spec.include_header:
        lines.append(_delimited_line(spec.column_names, spec.delimiter))

    for position, emp in enumerate(report.employees):
        lines.append(_delimited_line(
            (f.render(emp, position) for f in spec.fields), spec.delimiter
        ))

    return LINE_SEPARATOR.join(lines)


def _single_line(text: str) -> str:
    return text.replace("\r", " ").replace("\n", " ")


def _encode_fixed_width(report: UI19Report, spec: FormatSpec) -> str:
    """Concatenate every column at its declared width. No header line.

    Values longer than their column are truncated, not rejected; the
    receiving systems read by position and ignore anything past the width.
    Line breaks inside a value become spaces so each employee stays one record.
    """
    lines = []
    for position, emp in enumerate(report.employees):
        lines.append("".join(
            pad_or_truncate(_single_line(f.render(emp, position)), f.width, f.align)
            for f in spec.fields
        ))
    return LINE_SEPARATOR.join(lines)


def _encode_envelope(report: UI19Report, spec: FormatSpec) -> str:
    """H record, one D record per employee, T record with the detail count."""
    delimiter = spec.delimiter
    period = report.reporting_period

    lines = [_delimited_line(
        ("H", report.employer_details.uif_employer_reference,
         str(period.year), f"{period.month:02d}"),
        delimiter,
    )]

    for position, emp in enumerate(report.employees):
        values = ["D"]
        values.extend(f.render(emp, position) for f in spec.fields)
        lines.append(_delimited_line(values, delimiter))

    detail_count = len(lines) - 1
    lines.append(f"T{delimiter}{detail_count}")

    return LINE_SEPARATOR.join(lines)


def encode(report: UI19Report, system: str) -> str:
    """Encode a report for one target system.

    Args:
        report: Canonical UI-19 report (already validated upstream)
        system: Target system identifier (see formats.SUPPORTED_SYSTEMS)

    Returns:
        Full text payload, lines joined by '\\n', no trailing newline.

    Raises:
        UnsupportedSystemError: Unknown system identifier
        ReportTypeMismatchError: report is not a UI-19 report
    """
    spec = get_format_spec(system)
    require_ui19_report(report)

    if spec.layout == DELIMITED:
        payload = _encode_delimited(report, spec)
    elif spec.layout == FIXED_WIDTH:
        payload = _encode_fixed_width(report, spec)
    elif spec.layout == ENVELOPE:
        payload = _encode_envelope(report, spec)
    else:
        raise AssertionError(f"Unhandled layout {spec.layout!r} for {spec.system}")

    logger.debug(
        "Encoded %d employee(s) for %s (%d chars)",
        len(report.employees), spec.system, len(payload),
    )
    return payload


def encode_sage(report: UI19Report) -> str:
    return encode(report, "sage")


def encode_psiber(report: UI19Report) -> str:
    return encode(report, "psiber")


def encode_sars(report: UI19Report) -> str:
    return encode(report, "sars")


def encode_xero(report: UI19Report) -> str:
    return encode(report, "xero")


def encode_kerridge(report: UI19Report) -> str:
    return encode(report, "kerridge")


def encode_automate(report: UI19Report) -> str:
    return encode(report, "automate")


def encode_quickbooks(report: UI19Report) -> str:
    return encode(report, "quickbooks")
