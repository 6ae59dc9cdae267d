from typing import Final

import graphene

from ...receiving import GoodsReceiptStatus
from ..core.enums import to_enum

GoodsReceiptStatusEnum: Final[graphene.Enum] = to_enum(
    GoodsReceiptStatus, type_name="GoodsReceiptStatusEnum"
)
