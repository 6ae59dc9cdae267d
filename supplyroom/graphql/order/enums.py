from typing import Final

import graphene

from ...order import OrderStatus
from ..core.enums import to_enum

OrderStatusEnum: Final[graphene.Enum] = to_enum(
    OrderStatus, type_name="OrderStatusEnum"
)
