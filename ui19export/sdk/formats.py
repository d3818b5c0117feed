"""Format specification table for the seven supported target systems.

Each target is one FormatSpec constant. The spec is a tagged variant on
`layout`:

    delimited    header line (optional) + one delimited row per employee
    fixed_width  one line per employee, columns concatenated at exact widths
    envelope     H / D... / T record types (SARS eFiling)

Five targets are plain data and are encoded by the generic delimited engine.
Kerridge and SARS declare their columns here too, but their line structure is
assembled by dedicated routines in encoders.py.

The table is built once at import and exposed through a read-only mapping.
There is no registration API; the set of systems is closed.

Column accessors take (employee, position) where position is the 0-based
index of the employee in the report. Positions are only used for
presentation (sequential employee codes), never to reorder anything.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from .errors import UnsupportedSystemError
from .schemas import EmployeeRecord
from .transforms import (
    first_name_from_initials,
    format_currency_2dp,
    format_date_compact,
    format_date_dmy,
    format_date_iso,
    format_date_mdy,
    format_hours,
    format_hours_integer,
    optional_code,
    optional_date,
    pad_or_truncate,
    yes_no,
)

Accessor = Callable[[EmployeeRecord, int], str]

DELIMITED = "delimited"
FIXED_WIDTH = "fixed_width"
ENVELOPE = "envelope"


@dataclass(frozen=True)
class FieldSpec:
    """One output column."""

    name: str
    value: Accessor
    width: Optional[int] = None  # fixed-width layouts only
    align: str = "left"

    def render(self, employee: EmployeeRecord, position: int) -> str:
        return self.value(employee, position)


@dataclass(frozen=True)
class FormatSpec:
    """Layout contract for one target system."""

    system: str
    label: str
    layout: str
    fields: Tuple[FieldSpec, ...]
    delimiter: Optional[str] = None
    include_header: bool = True

    @property
    def column_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def record_width(self) -> Optional[int]:
        """Total line length for fixed-width layouts, None otherwise."""
        if self.layout != FIXED_WIDTH:
            return None
        return sum(f.width for f in self.fields)

    def column_range(self, name: str) -> Tuple[int, int]:
        """0-based [start, end) slice of a fixed-width column."""
        if self.layout != FIXED_WIDTH:
            raise ValueError(f"{self.system} is not a fixed-width layout")
        start = 0
        for f in self.fields:
            if f.name == name:
                return start, start + f.width
            start += f.width
        raise KeyError(name)


# =============================================================================
# COLUMN HELPERS
# =============================================================================

def _position(width: Optional[int] = None) -> Accessor:
    """1-based sequence number, optionally left-justified to width."""
    if width is None:
        return lambda emp, i: str(i + 1)
    return lambda emp, i: pad_or_truncate(str(i + 1), width)


def _attr(name: str) -> Accessor:
    return lambda emp, i: getattr(emp, name)


def _date(name: str, formatter) -> Accessor:
    return lambda emp, i: optional_date(getattr(emp, name), formatter)


def _code(name: str) -> Accessor:
    return lambda emp, i: optional_code(getattr(emp, name))


def _gross(emp: EmployeeRecord, i: int) -> str:
    return format_currency_2dp(emp.gross_remuneration)


def _hours(emp: EmployeeRecord, i: int) -> str:
    return format_hours(emp.hours_worked)


def _whole_hours(emp: EmployeeRecord, i: int) -> str:
    return format_hours_integer(emp.hours_worked)


def _contributor(yes: str, no: str) -> Accessor:
    return lambda emp, i: yes_no(emp.is_contributor, yes, no)


def _first_name(emp: EmployeeRecord, i: int) -> str:
    return first_name_from_initials(emp.initials)


def _upper(name: str) -> Accessor:
    return lambda emp, i: getattr(emp, name).upper()


# =============================================================================
# SPECS
# =============================================================================

SAGE = FormatSpec(
    system="sage",
    label="Sage Pastel Payroll",
    layout=DELIMITED,
    delimiter=",",
    fields=(
        FieldSpec("EmployeeCode", _position(5)),
        FieldSpec("Surname", _attr("surname")),
        FieldSpec("Initials", _attr("initials")),
        FieldSpec("IDNumber", _attr("id_number")),
        FieldSpec("StartDate", _date("commencement_date", format_date_iso)),
        FieldSpec("EndDate", _date("termination_date", format_date_iso)),
        FieldSpec("TerminationCode", _code("termination_reason_code")),
        FieldSpec("UIFStatus", _contributor("Y", "N")),
        FieldSpec("GrossPay", _gross),
    ),
)

PSIBER = FormatSpec(
    system="psiber",
    label="Psiber Payroll",
    layout=DELIMITED,
    delimiter="|",
    fields=(
        FieldSpec("IDNumber", _attr("id_number")),
        FieldSpec("Surname", _attr("surname")),
        FieldSpec("Initials", _attr("initials")),
        FieldSpec("BasicPay", _gross),
        FieldSpec("Hours", _whole_hours),
        FieldSpec("StartDate", _date("commencement_date", format_date_dmy)),
        FieldSpec("EndDate", _date("termination_date", format_date_dmy)),
        FieldSpec("TermCode", _code("termination_reason_code")),
        FieldSpec("UIF", _contributor("1", "0")),
    ),
)

# Detail (D) record columns. The H and T records are built by the encoder.
SARS = FormatSpec(
    system="sars",
    label="SARS eFiling",
    layout=ENVELOPE,
    delimiter="|",
    include_header=False,
    fields=(
        FieldSpec("IDNumber", _attr("id_number")),
        FieldSpec("Surname", _upper("surname")),
        FieldSpec("Initials", _upper("initials")),
        FieldSpec("Contributor", _contributor("Y", "N")),
        FieldSpec("NonContributorReason", _code("non_contributor_reason_code")),
        FieldSpec("GrossRemuneration", _gross),
        FieldSpec("CommencementDate", _date("commencement_date", format_date_iso)),
        FieldSpec("TerminationDate", _date("termination_date", format_date_iso)),
        FieldSpec("TerminationReason", _code("termination_reason_code")),
    ),
)

XERO = FormatSpec(
    system="xero",
    label="Xero Payroll",
    layout=DELIMITED,
    delimiter=",",
    fields=(
        FieldSpec("EmployeeID", _attr("employee_id")),
        FieldSpec("FirstName", _first_name),
        FieldSpec("LastName", _attr("surname")),
        FieldSpec("Email", lambda emp, i: ""),  # not captured on the UI-19
        FieldSpec("TaxNumber", _attr("id_number")),
        FieldSpec("StartDate", _date("commencement_date", format_date_dmy)),
        FieldSpec("EndDate", _date("termination_date", format_date_dmy)),
        FieldSpec("GrossEarnings", _gross),
    ),
)

# Positions: 1-5 code, 6-25 surname, 26-30 initials, 31-43 ID, 44-51 start,
# 52-59 end, 60-61 term code, 62 UIF, 63-74 gross
KERRIDGE = FormatSpec(
    system="kerridge",
    label="Kerridge KCS",
    layout=FIXED_WIDTH,
    include_header=False,
    fields=(
        FieldSpec("EmpCode", _position(), width=5),
        FieldSpec("Surname", _attr("surname"), width=20),
        FieldSpec("Initials", _attr("initials"), width=5),
        FieldSpec("IDNumber", _attr("id_number"), width=13),
        FieldSpec("StartDate", _date("commencement_date", format_date_compact), width=8),
        FieldSpec("EndDate", _date("termination_date", format_date_compact), width=8),
        FieldSpec("TermCode", _code("termination_reason_code"), width=2),
        FieldSpec("UIF", _contributor("Y", "N"), width=1),
        FieldSpec("Gross", _gross, width=12, align="right"),
    ),
)

AUTOMATE = FormatSpec(
    system="automate",
    label="Automate",
    layout=DELIMITED,
    delimiter="\t",
    fields=(
        FieldSpec("Emp No", _position()),
        FieldSpec("Surname", _attr("surname")),
        FieldSpec("Initials", _attr("initials")),
        FieldSpec("ID Number", _attr("id_number")),
        FieldSpec("Start Date", _date("commencement_date", format_date_dmy)),
        FieldSpec("End Date", _date("termination_date", format_date_dmy)),
        FieldSpec("Term Code", _code("termination_reason_code")),
        FieldSpec("UIF", _contributor("Yes", "No")),
        FieldSpec("Gross Pay", _gross),
        FieldSpec("Hours", _hours),
    ),
)

QUICKBOOKS = FormatSpec(
    system="quickbooks",
    label="QuickBooks Payroll",
    layout=DELIMITED,
    delimiter=",",
    fields=(
        FieldSpec("Employee ID", _attr("employee_id")),
        FieldSpec("Last Name", _attr("surname")),
        FieldSpec("First Name", _first_name),
        FieldSpec("Tax ID", _attr("id_number")),
        FieldSpec("Hire Date", _date("commencement_date", format_date_mdy)),
        FieldSpec("Release Date", _date("termination_date", format_date_mdy)),
        FieldSpec("Gross Pay", _gross),
        FieldSpec("Hours Worked", _hours),
        FieldSpec("UIF Contributor", _contributor("Yes", "No")),
    ),
)

SUPPORTED_SYSTEMS: Tuple[str, ...] = (
    "sage", "psiber", "sars", "xero", "kerridge", "automate", "quickbooks",
)

FORMAT_SPECS: Mapping[str, FormatSpec] = MappingProxyType({
    spec.system: spec
    for spec in (SAGE, PSIBER, SARS, XERO, KERRIDGE, AUTOMATE, QUICKBOOKS)
})

SYSTEM_LABELS: Mapping[str, str] = MappingProxyType({
    system: FORMAT_SPECS[system].label for system in SUPPORTED_SYSTEMS
})


def is_supported_system(system) -> bool:
    return isinstance(system, str) and system in FORMAT_SPECS


def get_format_spec(system: str) -> FormatSpec:
    """Look up the spec for a target system.

    Raises:
        UnsupportedSystemError: system is not one of SUPPORTED_SYSTEMS.
            Never falls back to a "closest" format.
    """
    if not is_supported_system(system):
        raise UnsupportedSystemError(system, SUPPORTED_SYSTEMS)
    return FORMAT_SPECS[system]
