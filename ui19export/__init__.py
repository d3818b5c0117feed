"""UI-19 Export - statutory declaration export codec for payroll systems."""

__version__ = "0.1.0"
