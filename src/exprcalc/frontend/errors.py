class CalculatorError(Exception):
    """Base class for every per-line failure the calculator reports."""


class ParseError(CalculatorError):
    """Raised when a line is not a well-formed expression."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position
