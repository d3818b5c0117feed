"""Loading canonical UI-19 reports from disk.

Reports are written by the report-generation pipeline as JSON (or YAML when
prepared by hand). Keys may be snake_case or the camelCase used by the web
application. Loading validates the document against schemas.UI19Report;
after that the codec trusts the report and does not re-check business rules.

CLI and MCP tools should be thin wrappers that call these functions.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from .errors import ReportLoadError
from .schemas import UI19Report

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")

# Summary counts the web application stores alongside the report. They are
# derived from the employee list, so they are dropped rather than trusted.
DERIVED_KEYS = (
    "totalEmployees", "totalContributors", "totalNonContributors",
    "total_employees", "total_contributors", "total_non_contributors",
)


def _format_validation_error(error: ValidationError) -> str:
    lines = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "<report>"
        lines.append(f"  {location}: {item.get('msg')}")
    return "\n".join(lines)


def parse_report(data: Dict[str, Any], source: str = "<data>") -> UI19Report:
    """Validate a report dictionary into a UI19Report.

    Args:
        data: Report document (snake_case or camelCase keys)
        source: Description used in error messages

    Raises:
        ReportLoadError: Document is not a mapping or fails validation
    """
    if not isinstance(data, dict):
        raise ReportLoadError(
            f"Report must be a mapping, got {type(data).__name__}: {source}"
        )

    cleaned = {k: v for k, v in data.items() if k not in DERIVED_KEYS}

    try:
        report = UI19Report.model_validate(cleaned)
    except ValidationError as e:
        raise ReportLoadError(
            f"Invalid report {source}:\n{_format_validation_error(e)}"
        ) from e

    logger.debug("Parsed report %s with %d employee(s)", report.report_id, len(report.employees))
    return report


def load_report(path: Union[str, Path]) -> UI19Report:
    """Load and validate a report file.

    Args:
        path: Path to a .json, .yaml or .yml report document

    Returns:
        Validated UI19Report

    Raises:
        ReportLoadError: File missing, unsupported extension, unparsable,
            or failing validation
    """
    path = Path(path)

    if not path.exists():
        raise ReportLoadError(f"Report file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        raise ReportLoadError(f"Report must be a JSON or YAML file: {path}")

    with open(path, "r", encoding="utf-8-sig") as f:
        try:
            if suffix in JSON_SUFFIXES:
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ReportLoadError(f"Could not parse {path}: {e}") from e

    report = parse_report(data, source=str(path))
    logger.info("Loaded report %s from %s", report.report_id, path)
    return report
