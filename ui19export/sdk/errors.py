"""Exception types raised by the export SDK.

CLI and MCP wrappers catch ExportError and present the message; everything
else is a bug and should propagate.
"""


class ExportError(Exception):
    """Base class for export failures."""
    pass


class UnsupportedSystemError(ExportError, ValueError):
    """Raised when a target system identifier is not one of the supported set."""

    def __init__(self, system, supported=()):
        self.system = system
        self.supported = tuple(supported)
        message = f"Unsupported financial system: {system!r}"
        if self.supported:
            message += f" (expected one of: {', '.join(self.supported)})"
        super().__init__(message)


class ReportTypeMismatchError(ExportError):
    """Raised when an encoder is handed a report kind it does not handle."""

    def __init__(self, report_type, expected="ui-19"):
        self.report_type = report_type
        self.expected = expected
        super().__init__(
            f"Export only supports {expected} reports, got {report_type!r}"
        )


class ReportLoadError(ExportError):
    """Raised when a report file cannot be read or fails model validation."""
    pass


class ConfigError(ExportError):
    """Raised for invalid settings keys or values."""
    pass
