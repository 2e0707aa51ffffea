class FactorialError(Exception):
    """Base exception for factorial-cli."""
    pass


class InvalidInputError(FactorialError):
    """Input text that is not a decimal integer (strict mode only)."""
    pass


class NegativeInputError(FactorialError, ValueError):
    """Factorial requested for a negative integer."""

    def __init__(self, n: int):
        super().__init__(f"factorial is undefined for negative integers (n={n})")
        self.n = n


class FactorialOverflowError(FactorialError, OverflowError):
    """Result does not fit in an unsigned 64-bit integer (strict mode only)."""

    def __init__(self, n: int, limit: int):
        super().__init__(f"{n}! does not fit in 64 unsigned bits (largest exact n is {limit})")
        self.n = n
        self.limit = limit


class ConfigurationError(FactorialError):
    """Errors related to configuration."""
    pass
