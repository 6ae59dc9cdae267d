import re

import graphene

from ...inventory import error_codes as inventory_error_codes
from ...order import error_codes as order_error_codes
from ...practice import error_codes as practice_error_codes
from ...receiving import error_codes as receiving_error_codes


def str_to_enum(name: str) -> str:
    """Create an enum value name from a status or choice string."""
    return re.sub(r"[^0-9a-zA-Z]+", "_", name).upper()


def to_enum(enum_cls, *, type_name=None, **options) -> graphene.Enum:
    """Create a graphene enum from a class holding ``CHOICES``."""
    type_name = type_name or (enum_cls.__name__ + "Enum")
    enum_data = [(str_to_enum(code), code) for code, _name in enum_cls.CHOICES]
    return graphene.Enum(type_name, enum_data, **options)


LocationErrorCode = graphene.Enum.from_enum(practice_error_codes.LocationErrorCode)
OrderErrorCode = graphene.Enum.from_enum(order_error_codes.OrderErrorCode)
GoodsReceiptErrorCode = graphene.Enum.from_enum(
    receiving_error_codes.ReceiptErrorCode
)
StockErrorCode = graphene.Enum.from_enum(inventory_error_codes.StockErrorCode)
