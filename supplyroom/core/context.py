import attrs

from ..practice import MembershipRole
from .exceptions import ForbiddenError


@attrs.frozen
class RequestContext:
    """Authenticated caller as supplied by the auth gate.

    The core trusts the gate for identity but re-checks the role before
    mutating anything.
    """

    user: object
    practice_id: object
    role: str | None = None

    @property
    def user_id(self):
        return getattr(self.user, "pk", None)


def require_role(context: RequestContext | None, minimum_role: str) -> None:
    if context is None or not context.role:
        raise ForbiddenError("Missing role on request context")
    if context.role not in MembershipRole.RANK:
        raise ForbiddenError(f"Unknown role '{context.role}'")
    if MembershipRole.RANK[context.role] < MembershipRole.RANK[minimum_role]:
        raise ForbiddenError(
            f"Insufficient permissions. Required: {minimum_role}, "
            f"Has: {context.role}"
        )
