"""
Calculation errors.
"""


class InvalidParameter(ValueError):
    """Raised when a calculator input violates its constraints."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"
