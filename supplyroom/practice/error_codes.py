from enum import Enum


class LocationErrorCode(Enum):
    BUSINESS_RULE = "business_rule"
    FORBIDDEN = "forbidden"
    GRAPHQL_ERROR = "graphql_error"
    INVALID = "invalid"
    INVALID_STATE = "invalid_state"
    NOT_FOUND = "not_found"
    REQUIRED = "required"
