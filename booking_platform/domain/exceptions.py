"""Domain exceptions shared by all business modules."""


class DomainError(Exception):
    """Base class for business rule violations."""


class ValidationError(DomainError, ValueError):
    """Raised when input data breaks an entity or use case rule."""


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist (or is not visible)."""

    def __init__(self, entity: str, identifier: str):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} '{identifier}' not found")


class InvalidStatusTransitionError(DomainError):
    """Raised when an entity is moved to a status it cannot reach."""

    def __init__(self, entity: str, current: str, target: str):
        self.entity = entity
        self.current = current
        self.target = target
        super().__init__(f"{entity} cannot move from '{current}' to '{target}'")


class BookingConflictError(DomainError):
    """Raised when a booking overlaps an active booking of the same resource."""


class DuplicateUserError(DomainError):
    """Raised when registering an email that is already taken."""


class PaymentDeclinedError(DomainError):
    """Raised when the payment gateway declines a charge."""

    def __init__(self, message: str, payment_id: str = ""):
        self.payment_id = payment_id
        super().__init__(message)


class PaymentGatewayError(DomainError):
    """Raised when the payment gateway cannot be reached or answers garbage."""
