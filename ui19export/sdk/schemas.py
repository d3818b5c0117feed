"""Pydantic schemas for the canonical UI-19 report.

The report is produced upstream by the report-generation pipeline and handed
to the export codec fully populated. All schemas are frozen (a report is
immutable once generated) and use extra='forbid' so that a typo in a report
file fails loudly instead of silently dropping a column.

Field names are snake_case; camelCase aliases are accepted so that report
documents written by the web application load without translation.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


UI19_REPORT_TYPE = "ui-19"

ReportType = Literal["ui-19", "basic-employee-info", "workforce-profile", "leave-movement"]

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Official UI-19 form codes. Code 1 is reserved on the form.
TERMINATION_REASON_LABELS: Dict[int, str] = {
    2: "Deceased",
    3: "Retired",
    4: "Dismissed",
    5: "Contract expired",
    6: "Resigned",
    7: "Constructive dismissal",
    8: "Insolvency/Liquidation",
    9: "Maternity/Adoption",
    10: "Illness/Medically boarded",
    11: "Retrenched/Staff reduction",
    12: "Transfer to another Branch",
    13: "Absconded",
    14: "Business closed",
    15: "Death of Domestic Employer",
    16: "Voluntary severance package",
    17: "Reduced Work Time",
    18: "Commissioning Parental",
    19: "Parental Leave",
}

NON_CONTRIBUTOR_REASON_LABELS: Dict[int, str] = {
    1: "Temporary employees",
    2: "Employees who earn commission only",
    3: "No income paid for the payroll period",
}


def termination_reason_label(code: Optional[int]) -> str:
    """Display label for a termination reason code ('' if unknown)."""
    if code is None:
        return ""
    return TERMINATION_REASON_LABELS.get(code, "")


def non_contributor_reason_label(code: Optional[int]) -> str:
    """Display label for a non-contributor reason code ('' if unknown)."""
    if code is None:
        return ""
    return NON_CONTRIBUTOR_REASON_LABELS.get(code, "")


class _Model(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ReportingPeriod(_Model):
    """Calendar month the declaration covers."""

    month: int = Field(..., ge=1, le=12, description="Month number (1-12)")
    year: int = Field(..., ge=1900, le=9999, description="Four-digit year")
    start_date: Optional[date] = Field(default=None, description="First day of the period")
    end_date: Optional[date] = Field(default=None, description="Last day of the period")

    @property
    def label(self) -> str:
        """Human-readable period, e.g. 'January 2026'."""
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"


class Address(_Model):
    """Postal or physical address."""

    line1: str
    line2: Optional[str] = None
    suburb: Optional[str] = None
    city: str
    province: str
    postal_code: str
    country: str = "South Africa"

    def one_line(self) -> str:
        """Single-line rendering used on the declaration form."""
        street = self.line1
        if self.line2:
            street += f", {self.line2}"
        return f"{street}, {self.city}, {self.province}, {self.postal_code}"


class EmployerDeclaration(_Model):
    """Section 1 of the UI-19: employer identity and statutory references."""

    uif_employer_reference: str = Field(..., min_length=1, description="UIF employer reference number")
    paye_reference: Optional[str] = Field(default=None, description="SARS PAYE reference number")
    trading_name: str = Field(..., description="Tenant trading / legal name")
    physical_address: Address
    postal_address: Optional[Address] = None
    company_registration_number: str
    email: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    authorised_person_name: Optional[str] = None
    authorised_person_id_number: Optional[str] = None


class EmployeeRecord(_Model):
    """Section 2 of the UI-19: one row per affected employee (columns A-J)."""

    employee_id: str = Field(..., description="System-internal employee identifier")
    surname: str = Field(..., description="Column A")
    initials: str = Field(..., description="Column B")
    id_number: str = Field(..., min_length=1, description="Column C: identity document number")
    gross_remuneration: Decimal = Field(
        ..., ge=0, max_digits=15, decimal_places=2,
        description="Column D: total gross remuneration for the month (Rands and cents)",
    )
    hours_worked: Decimal = Field(default=Decimal("0"), ge=0, description="Column E")
    commencement_date: date = Field(..., description="Column F")
    termination_date: Optional[date] = Field(default=None, description="Column G")
    termination_reason_code: Optional[int] = Field(
        default=None, ge=1, le=19, description="Column H"
    )
    is_contributor: bool = Field(..., description="Column I: UIF contributor")
    non_contributor_reason_code: Optional[int] = Field(
        default=None, ge=1, le=3, description="Column J"
    )

    @model_validator(mode="after")
    def check_invariants(self) -> "EmployeeRecord":
        """Validate cross-field rules of the declaration form."""
        errors = []

        if self.termination_date is not None and self.termination_date < self.commencement_date:
            errors.append(
                f"termination_date ({self.termination_date}) precedes "
                f"commencement_date ({self.commencement_date})"
            )

        has_date = self.termination_date is not None
        has_reason = self.termination_reason_code is not None
        if has_date != has_reason:
            errors.append(
                "termination_reason_code must be given if and only if termination_date is given"
            )

        if not self.is_contributor and self.non_contributor_reason_code is None:
            errors.append("non_contributor_reason_code is required for non-contributors")

        if errors:
            raise ValueError("; ".join(errors))

        return self


class Declaration(_Model):
    """Closing declaration block signed by the authorised person."""

    statement: str
    authorised_person_name: str
    authorised_person_title: Optional[str] = None
    signature_date: Optional[date] = None


class UI19Report(_Model):
    """Complete canonical UI-19 report.

    The employee sequence keeps the order supplied by the report pipeline.
    Encoders never reorder, deduplicate or filter it.
    """

    report_id: str
    report_type: ReportType = UI19_REPORT_TYPE
    company_id: str
    reporting_period: ReportingPeriod
    employer_details: EmployerDeclaration
    employees: Tuple[EmployeeRecord, ...] = ()
    declaration: Optional[Declaration] = None
    generated_at: Optional[datetime] = None
    generated_by: Optional[str] = None
    generated_by_name: Optional[str] = None

    @property
    def total_employees(self) -> int:
        return len(self.employees)

    @property
    def total_contributors(self) -> int:
        return sum(1 for emp in self.employees if emp.is_contributor)

    @property
    def total_non_contributors(self) -> int:
        return self.total_employees - self.total_contributors
