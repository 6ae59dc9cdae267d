"""Domain error taxonomy shared by every supplyroom app.

Errors raised by repositories and services propagate unchanged to callers.
The GraphQL layer turns them into ``{field, code, message}`` payloads using
``code`` and ``field``.
"""


class DomainError(Exception):
    """Base class for every expected, caller-facing failure."""

    code = "domain_error"

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class NotFoundError(DomainError):
    """Entity does not exist, or belongs to another practice.

    Both cases produce the same message so a caller can't discover rows
    owned by a different tenant.
    """

    code = "not_found"

    def __init__(self, entity: str, entity_id=None, field: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        if entity_id is None:
            message = f"{entity} not found"
        else:
            message = f"{entity} with ID '{entity_id}' not found"
        super().__init__(message, field=field)


class ValidationError(DomainError):
    code = "validation_error"


class BusinessRuleViolationError(DomainError):
    code = "business_rule_violation"


class InvalidStateError(BusinessRuleViolationError):
    """Operation is not allowed in the entity's current lifecycle state."""

    code = "invalid_state"


class ForbiddenError(DomainError):
    code = "forbidden"


class CrossPracticeReference(ValidationError):
    """Raised when a write references a row owned by a different practice."""

    def __init__(self, entity: str, entity_id, field: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} '{entity_id}' does not belong to this practice", field=field
        )
