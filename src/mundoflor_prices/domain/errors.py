class PriceError(ValueError):
    """Base exception for price text that cannot be turned into an amount."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class InvalidAmount(PriceError):
    """Raised when no numeric literal survives cleaning."""


class AmbiguousGrouping(PriceError):
    """Raised in strict mode when a lone comma could be grouping or decimal."""


class ExtractionError(PriceError):
    """Raised when no selector finds price text in an HTML snapshot."""
