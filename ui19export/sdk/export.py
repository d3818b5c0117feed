"""Export facade: the single entry point the download layer calls.

    result = export_report(report, "sage")
    result.content   # UTF-8 bytes with byte-order mark
    result.filename  # SAGE_Acme_Holdings_January_2026_20260118103045.csv

Nothing here touches storage or the network; callers decide what to do with
the bytes.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from .declaration import render_declaration_csv
from .encoders import encode
from .filenames import generate_filename
from .formats import SUPPORTED_SYSTEMS, is_supported_system
from .errors import UnsupportedSystemError
from .schemas import UI19Report

logger = logging.getLogger(__name__)

# BOM-prefixed UTF-8, so importers that sniff the marker detect the encoding.
PAYLOAD_ENCODING = "utf-8-sig"
DECLARATION_PREFIX = "UI19"


@dataclass(frozen=True)
class ExportResult:
    """Encoded payload plus its download filename."""

    content: bytes
    filename: str
    system: str
    record_count: int

    @property
    def text(self) -> str:
        """Payload without the byte-order mark."""
        return self.content.decode(PAYLOAD_ENCODING)


def _encode_bytes(text: str) -> bytes:
    return text.encode(PAYLOAD_ENCODING)


def _filename_for(prefix: str, report: UI19Report, tenant_name: Optional[str],
                  period_label: Optional[str], generated_at: Optional[datetime]) -> str:
    if tenant_name is None:
        tenant_name = report.employer_details.trading_name
    if period_label is None:
        period_label = report.reporting_period.label
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)
    return generate_filename(prefix, tenant_name, period_label, generated_at)


def export_report(
    report: UI19Report,
    system: str,
    *,
    generated_at: Optional[datetime] = None,
    tenant_name: Optional[str] = None,
    period_label: Optional[str] = None,
) -> ExportResult:
    """Encode a UI-19 report for a target system.

    Args:
        report: Canonical UI-19 report
        system: One of SUPPORTED_SYSTEMS
        generated_at: Instant used in the filename (default: now, UTC)
        tenant_name: Filename tenant part (default: employer trading name)
        period_label: Filename period part (default: e.g. 'January 2026')

    Returns:
        ExportResult with BOM-prefixed UTF-8 content and generated filename

    Raises:
        UnsupportedSystemError: system is not supported (checked first)
        ReportTypeMismatchError: report is not a UI-19 report
    """
    if not is_supported_system(system):
        raise UnsupportedSystemError(system, SUPPORTED_SYSTEMS)

    payload = encode(report, system)
    content = _encode_bytes(payload)
    filename = _filename_for(system, report, tenant_name, period_label, generated_at)

    logger.info(
        "Exported %s for %s: %d employee(s), %d bytes -> %s",
        report.report_id, system, len(report.employees), len(content), filename,
    )

    return ExportResult(
        content=content,
        filename=filename,
        system=system,
        record_count=len(report.employees),
    )


def export_declaration(
    report: UI19Report,
    *,
    generated_at: Optional[datetime] = None,
    tenant_name: Optional[str] = None,
    period_label: Optional[str] = None,
) -> ExportResult:
    """Render the UI-19 form CSV with the same BOM and filename conventions."""
    content = _encode_bytes(render_declaration_csv(report))
    filename = _filename_for(DECLARATION_PREFIX, report, tenant_name, period_label, generated_at)

    logger.info(
        "Exported %s declaration: %d employee(s) -> %s",
        report.report_id, len(report.employees), filename,
    )

    return ExportResult(
        content=content,
        filename=filename,
        system="ui19",
        record_count=len(report.employees),
    )
