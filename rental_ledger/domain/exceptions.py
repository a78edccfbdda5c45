"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidPricingInputError(DomainException):
    """Pricing inputs violate a precondition (duration < 1, negative distance or rate)"""

    pass


class InvalidRecordError(DomainException):
    """Record is malformed or inconsistent with itself"""

    pass


class UnresolvedReferenceError(DomainException):
    """Record references a vehicle or booking id that was not loaded"""

    pass


class DuplicateRecordError(DomainException):
    """Same id appears twice within one collection"""

    pass
