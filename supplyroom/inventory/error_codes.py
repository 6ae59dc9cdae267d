from enum import Enum


class StockErrorCode(Enum):
    BUSINESS_RULE = "business_rule"
    FORBIDDEN = "forbidden"
    GRAPHQL_ERROR = "graphql_error"
    INVALID = "invalid"
    INVALID_STATE = "invalid_state"
    NEGATIVE_STOCK = "negative_stock"
    NOT_FOUND = "not_found"
    REQUIRED = "required"
