"""Export filename generation.

Format: SYSTEM_TENANT_PERIOD_TIMESTAMP.csv

The extension is always .csv, including pipe, tab and fixed-width payloads;
the downstream importers expect it. Two exports only collide when the same
system, tenant and period are exported within the same second.
"""

import re
from datetime import datetime, timezone

FILENAME_EXTENSION = "csv"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
TIMESTAMP_LENGTH = 14

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9 ]")
_SPACE_RUNS = re.compile(r" +")


def sanitize_filename_part(text: str) -> str:
    """Make a tenant name or period label safe for a filename.

    'Acme (Pty) Ltd' -> 'Acme__Pty__Ltd'
    'January 2026'   -> 'January_2026'
    """
    cleaned = _UNSAFE_CHARS.sub("_", text.strip())
    return _SPACE_RUNS.sub("_", cleaned)


def format_timestamp(instant: datetime) -> str:
    """Compact sortable timestamp, e.g. 20260118103045.

    Aware datetimes are converted to UTC first; naive ones are used as given.
    """
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc)
    return instant.strftime(TIMESTAMP_FORMAT)[:TIMESTAMP_LENGTH]


def generate_filename(prefix: str, tenant_name: str, period_label: str,
                      generated_at: datetime) -> str:
    """Build the export filename.

    Args:
        prefix: Target system identifier (upper-cased in the name), or a
            report tag such as 'UI19'
        tenant_name: Tenant display name
        period_label: Reporting period label, e.g. 'January 2026'
        generated_at: Generation instant

    Returns:
        e.g. 'SAGE_Acme_Holdings_January_2026_20260118103045.csv'
    """
    parts = [
        prefix.upper(),
        sanitize_filename_part(tenant_name),
        sanitize_filename_part(period_label),
        format_timestamp(generated_at),
    ]
    return "_".join(parts) + "." + FILENAME_EXTENSION
