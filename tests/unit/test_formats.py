"""Tests for the format specification table."""

import dataclasses

import pytest

from ui19export.sdk.errors import UnsupportedSystemError
from ui19export.sdk.formats import (
    FORMAT_SPECS,
    SUPPORTED_SYSTEMS,
    SYSTEM_LABELS,
    get_format_spec,
    is_supported_system,
)


def test_seven_systems_in_order():
    assert SUPPORTED_SYSTEMS == (
        "sage", "psiber", "sars", "xero", "kerridge", "automate", "quickbooks",
    )
    assert set(FORMAT_SPECS) == set(SUPPORTED_SYSTEMS)


def test_labels():
    assert SYSTEM_LABELS["sage"] == "Sage Pastel Payroll"
    assert SYSTEM_LABELS["sars"] == "SARS eFiling"
    assert SYSTEM_LABELS["kerridge"] == "Kerridge KCS"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        FORMAT_SPECS["custom"] = FORMAT_SPECS["sage"]


def test_specs_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        FORMAT_SPECS["sage"].delimiter = ";"


@pytest.mark.parametrize("system", ["SAGE", "pastel", "", None, "sars "])
def test_unknown_systems_rejected(system):
    assert not is_supported_system(system)
    with pytest.raises(UnsupportedSystemError):
        get_format_spec(system)


def test_unsupported_error_is_value_error():
    with pytest.raises(ValueError, match="Unsupported financial system"):
        get_format_spec("pastel")


class TestKerridgeLayout:

    spec = FORMAT_SPECS["kerridge"]

    def test_record_width(self):
        assert self.spec.record_width == 74

    def test_column_positions(self):
        assert self.spec.column_range("EmpCode") == (0, 5)
        assert self.spec.column_range("Surname") == (5, 25)
        assert self.spec.column_range("Initials") == (25, 30)
        assert self.spec.column_range("IDNumber") == (30, 43)
        assert self.spec.column_range("StartDate") == (43, 51)
        assert self.spec.column_range("EndDate") == (51, 59)
        assert self.spec.column_range("TermCode") == (59, 61)
        assert self.spec.column_range("UIF") == (61, 62)
        assert self.spec.column_range("Gross") == (62, 74)

    def test_only_gross_right_aligned(self):
        right = [f.name for f in self.spec.fields if f.align == "right"]
        assert right == ["Gross"]

    def test_no_header(self):
        assert self.spec.include_header is False


def test_delimited_specs_have_no_widths():
    for system in ("sage", "psiber", "xero", "automate", "quickbooks"):
        spec = FORMAT_SPECS[system]
        assert spec.layout == "delimited"
        assert spec.record_width is None
        assert all(f.width is None for f in spec.fields)


def test_column_range_only_for_fixed_width():
    with pytest.raises(ValueError):
        FORMAT_SPECS["sage"].column_range("Surname")
