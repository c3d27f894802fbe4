"""Exceptions raised by chromalite."""


class ChromaliteError(ValueError):
    """Base class for every error raised by chromalite."""


class ColorParseError(ChromaliteError):
    """A color notation string could not be parsed."""

    def __init__(self, text: str, reason: str = "") -> None:
        self.text = text
        self.reason = reason
        message = f"Cannot parse color {text!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ColorDomainError(ChromaliteError):
    """A value is outside a hard bound where no clamping is defined."""
