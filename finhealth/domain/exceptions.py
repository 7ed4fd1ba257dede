"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class NonFiniteInputError(DomainException):
    """A numeric input was NaN or infinite"""

    def __init__(self, field_name: str, value: float):
        self.field_name = field_name
        self.value = value
        super().__init__(f"{field_name} must be a finite number, got {value!r}")


class InvalidTransactionDataError(DomainException):
    """Transaction data is malformed or invalid"""

    pass
