import graphene

from ..core import ResolveInfo
from ..core.types import NonNullList
from .enums import OrderStatusEnum
from .mutations import OrderCancel, OrderClose, OrderCreate, OrderDelete, OrderSend
from .resolvers import resolve_order, resolve_orders
from .types import Order


class OrderQueries(graphene.ObjectType):
    order = graphene.Field(
        Order,
        id=graphene.Argument(
            graphene.ID, required=True, description="ID of the order."
        ),
        description="Look up an order of the practice by ID.",
    )
    orders = NonNullList(
        Order,
        status=graphene.Argument(OrderStatusEnum, description="Filter by status."),
        supplier_id=graphene.Argument(graphene.ID, description="Filter by supplier."),
        required=True,
        description="Orders of the practice, newest first.",
    )

    @staticmethod
    def resolve_order(_root, info: ResolveInfo, *, id):
        return resolve_order(info, id)

    @staticmethod
    def resolve_orders(_root, info: ResolveInfo, *, status=None, supplier_id=None):
        if status is not None:
            status = status.value
        return resolve_orders(info, status=status, supplier_id=supplier_id)


class OrderMutations(graphene.ObjectType):
    order_create = OrderCreate.Field()
    order_send = OrderSend.Field()
    order_cancel = OrderCancel.Field()
    order_close = OrderClose.Field()
    order_delete = OrderDelete.Field()
