"""UI-19 Export SDK - canonical report model and system-specific export codec."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    validate_setting,
    get_data_path,
    get_output_dir,
    get_default_system,
    SETTING_KEYS,
)

from .errors import (
    ExportError,
    UnsupportedSystemError,
    ReportTypeMismatchError,
    ReportLoadError,
    ConfigError,
)

from .schemas import (
    UI19_REPORT_TYPE,
    Address,
    Declaration,
    EmployeeRecord,
    EmployerDeclaration,
    ReportingPeriod,
    UI19Report,
    TERMINATION_REASON_LABELS,
    NON_CONTRIBUTOR_REASON_LABELS,
    termination_reason_label,
    non_contributor_reason_label,
)

from .formats import (
    FieldSpec,
    FormatSpec,
    FORMAT_SPECS,
    SUPPORTED_SYSTEMS,
    SYSTEM_LABELS,
    get_format_spec,
    is_supported_system,
)

from .encoders import (
    encode,
    encode_sage,
    encode_psiber,
    encode_sars,
    encode_xero,
    encode_kerridge,
    encode_automate,
    encode_quickbooks,
)

from .filenames import generate_filename, sanitize_filename_part, format_timestamp
from .declaration import render_declaration_csv
from .export import ExportResult, export_report, export_declaration
from .reports import load_report, parse_report

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "validate_setting",
    "get_data_path",
    "get_output_dir",
    "get_default_system",
    "SETTING_KEYS",
    # Errors
    "ExportError",
    "UnsupportedSystemError",
    "ReportTypeMismatchError",
    "ReportLoadError",
    "ConfigError",
    # Model
    "UI19_REPORT_TYPE",
    "Address",
    "Declaration",
    "EmployeeRecord",
    "EmployerDeclaration",
    "ReportingPeriod",
    "UI19Report",
    "TERMINATION_REASON_LABELS",
    "NON_CONTRIBUTOR_REASON_LABELS",
    "termination_reason_label",
    "non_contributor_reason_label",
    # Formats
    "FieldSpec",
    "FormatSpec",
    "FORMAT_SPECS",
    "SUPPORTED_SYSTEMS",
    "SYSTEM_LABELS",
    "get_format_spec",
    "is_supported_system",
    # Encoders
    "encode",
    "encode_sage",
    "encode_psiber",
    "encode_sars",
    "encode_xero",
    "encode_kerridge",
    "encode_automate",
    "encode_quickbooks",
    # Filenames
    "generate_filename",
    "sanitize_filename_part",
    "format_timestamp",
    # Export
    "render_declaration_csv",
    "ExportResult",
    "export_report",
    "export_declaration",
    # Reports
    "load_report",
    "parse_report",
]
