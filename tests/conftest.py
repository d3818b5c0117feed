"""Shared fixtures: synthetic UI-19 reports, no external dependencies."""

import json
from datetime import date
from decimal import Decimal

import pytest

from ui19export.sdk.schemas import UI19Report


def employee_dict(**overrides) -> dict:
    """Minimal contributing employee with no termination."""
    data = {
        "employee_id": "EMP001",
        "surname": "Naidoo",
        "initials": "P.K.",
        "id_number": "8001015009087",
        "gross_remuneration": Decimal("18500.00"),
        "hours_worked": Decimal("160"),
        "commencement_date": date(2026, 1, 15),
        "is_contributor": True,
    }
    data.update(overrides)
    return data


def report_dict(employees=None, **overrides) -> dict:
    """Report document with employer details for 'Acme Holdings (Pty) Ltd'."""
    if employees is None:
        employees = [employee_dict()]
    data = {
        "report_id": "rep-2026-02",
        "company_id": "acme",
        "reporting_period": {"month": 2, "year": 2026},
        "employer_details": {
            "uif_employer_reference": "U123456789",
            "paye_reference": "7123456789",
            "trading_name": "Acme Holdings (Pty) Ltd",
            "physical_address": {
                "line1": "12 Long Street",
                "city": "Cape Town",
                "province": "Western Cape",
                "postal_code": "8001",
            },
            "company_registration_number": "2015/123456/07",
            "email": "payroll@acme.example",
            "phone": "021 555 0100",
        },
        "employees": employees,
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_employee():
    """Factory for employee dicts: make_employee(surname='Li', ...)."""
    return employee_dict


@pytest.fixture
def make_report():
    """Factory for validated reports: make_report([emp, ...], **overrides)."""
    def _make(employees=None, **overrides):
        return UI19Report.model_validate(report_dict(employees, **overrides))
    return _make


@pytest.fixture
def two_employee_report(make_report):
    """One active contributor and one terminated non-contributor."""
    return make_report([
        employee_dict(),
        employee_dict(
            employee_id="EMP002",
            surname="Li",
            initials="W",
            id_number="9203035800081",
            gross_remuneration=Decimal("7250.5"),
            hours_worked=Decimal("87.5"),
            commencement_date=date(2025, 6, 1),
            termination_date=date(2026, 2, 28),
            termination_reason_code=6,
            is_contributor=False,
            non_contributor_reason_code=1,
        ),
    ])


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the SDK at an empty config dir and a private data dir."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    config_dir.mkdir()
    data_dir.mkdir()

    monkeypatch.setenv("UI19_EXPORT_CONFIG_PATH", str(config_dir))
    monkeypatch.setenv("XDG_DATA_HOME", str(data_dir))

    return {"config_dir": config_dir, "data_dir": data_dir}


@pytest.fixture
def report_file(tmp_path):
    """Write a camelCase JSON report like the web application produces."""
    document = {
        "reportId": "rep-2026-01",
        "reportType": "ui-19",
        "companyId": "acme",
        "reportingPeriod": {"month": 1, "year": 2026},
        "employerDetails": {
            "uifEmployerReference": "U123456789",
            "tradingName": "Acme Holdings",
            "physicalAddress": {
                "line1": "12 Long Street",
                "city": "Cape Town",
                "province": "Western Cape",
                "postalCode": "8001",
            },
            "companyRegistrationNumber": "2015/123456/07",
        },
        "employees": [
            {
                "employeeId": "EMP001",
                "surname": "Naidoo",
                "initials": "P.K.",
                "idNumber": "8001015009087",
                "grossRemuneration": 18500,
                "hoursWorked": 160,
                "commencementDate": "2026-01-15",
                "isContributor": True,
            }
        ],
        "totalEmployees": 1,
        "totalContributors": 1,
        "totalNonContributors": 0,
    }
    path = tmp_path / "report.json"
    path.write_text(json.dumps(document))
    return path
