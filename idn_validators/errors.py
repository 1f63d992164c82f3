"""Errors raised by the formatting family.

Validators and parsers never raise; they answer False, None or 0. Formatters
with a structural precondition raise a subclass of `FormattingError`.
"""


class FormattingError(ValueError):
    """Raised when an input cannot be mapped onto its canonical form."""

    def __init__(self, message: str, value=None) -> None:
        super().__init__(message)
        self.value = value


class InvalidNPWPError(FormattingError):
    """Raised when an NPWP does not carry exactly 15 digits."""

    def __init__(self, value: str) -> None:
        super().__init__("NPWP must be exactly 15 digits", value)


class InvalidVehiclePlateError(FormattingError):
    """Raised when a plate cannot be split into prefix, number and suffix."""

    def __init__(self, value: str) -> None:
        super().__init__("Invalid vehicle plate format", value)
