from types import SimpleNamespace

from ..api import schema


class ApiClient:
    """Run GraphQL operations against the schema on behalf of one caller."""

    def __init__(self, request_context=None):
        self.request_context = request_context

    def post_graphql(self, query, variables=None):
        return schema.execute(
            query,
            variable_values=variables,
            context_value=SimpleNamespace(request_context=self.request_context),
        )


def get_graphql_content(response, *, ignore_errors: bool = False):
    """Return the formatted response, failing the test on GraphQL errors."""
    content = response.formatted
    if not ignore_errors:
        assert "errors" not in content, content["errors"]
    return content


def assert_no_permission(response):
    content = response.formatted
    assert content["data"] is None or not any(content["data"].values())
    message = content["errors"][0]["message"]
    assert message.startswith(("Missing role", "Insufficient permissions")), message
