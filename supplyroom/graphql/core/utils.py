from ...core.context import RequestContext, require_role
from ...practice import MembershipRole
from . import ResolveInfo


def get_request_context(info: ResolveInfo) -> RequestContext | None:
    return getattr(info.context, "request_context", None)


def get_reader_context(info: ResolveInfo) -> RequestContext:
    """Return the request context of a caller allowed to read practice data."""
    context = get_request_context(info)
    require_role(context, MembershipRole.VIEWER)
    return context
