from typing import Any

from graphql import GraphQLResolveInfo


class ResolveInfo(GraphQLResolveInfo):
    # any object carrying a ``request_context`` attribute
    context: Any
