from decimal import Decimal

import graphene

from ...order.actions import (
    OrderItemInput,
    cancel_order,
    close_order,
    create_order,
    delete_order,
    send_order,
)
from ..core import ResolveInfo
from ..core.mutations import BaseMutation
from ..core.types import NonNullList, OrderError
from .types import Order


class OrderItemCreateInput(graphene.InputObjectType):
    item_id = graphene.ID(required=True, description="ID of the practice item.")
    quantity = graphene.Int(required=True, description="Quantity to order.")
    unit_price = graphene.Decimal(description="Unit cost. Defaults to zero.")
    notes = graphene.String()


class OrderCreateInput(graphene.InputObjectType):
    supplier_id = graphene.ID(required=True, description="Supplier to order from.")
    items = NonNullList(OrderItemCreateInput, required=True)
    reference = graphene.String(description="Supplier or internal reference.")
    notes = graphene.String()
    currency = graphene.String(description="Currency code of the unit prices.")


class OrderCreate(BaseMutation):
    order = graphene.Field(Order, description="The created order.")

    class Arguments:
        input = OrderCreateInput(required=True, description="Fields of the order.")

    class Meta:
        description = "Create a draft purchase order."
        error_type_class = OrderError
        error_type_field = "order_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        data = data["input"]
        items = [
            OrderItemInput(
                item_id=line["item_id"],
                quantity=line["quantity"],
                unit_price_amount=line.get("unit_price") or Decimal(0),
                notes=line.get("notes") or "",
            )
            for line in data["items"]
        ]
        order = create_order(
            context,
            supplier_id=data["supplier_id"],
            items=items,
            reference=data.get("reference") or "",
            notes=data.get("notes") or "",
            currency=data.get("currency"),
        )
        return OrderCreate(order=order)


class OrderSend(BaseMutation):
    order = graphene.Field(Order, description="The sent order.")

    class Arguments:
        id = graphene.ID(required=True, description="ID of the order to send.")

    class Meta:
        description = "Mark a draft order as sent to its supplier."
        error_type_class = OrderError
        error_type_field = "order_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        return OrderSend(order=send_order(context, data["id"]))


class OrderCancel(BaseMutation):
    order = graphene.Field(Order, description="The cancelled order.")

    class Arguments:
        id = graphene.ID(required=True, description="ID of the order to cancel.")

    class Meta:
        description = (
            "Cancel a draft or sent order. Orders with confirmed goods receipts "
            "can't be cancelled."
        )
        error_type_class = OrderError
        error_type_field = "order_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        return OrderCancel(order=cancel_order(context, data["id"]))


class OrderClose(BaseMutation):
    order = graphene.Field(Order, description="The closed order.")

    class Arguments:
        id = graphene.ID(required=True, description="ID of the order to close.")

    class Meta:
        description = (
            "Accept a partially received order as received when the remainder "
            "will not be delivered."
        )
        error_type_class = OrderError
        error_type_field = "order_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        return OrderClose(order=close_order(context, data["id"]))


class OrderDelete(BaseMutation):
    order_id = graphene.ID(description="ID of the deleted order.")

    class Arguments:
        id = graphene.ID(required=True, description="ID of the order to delete.")

    class Meta:
        description = "Delete a draft order."
        error_type_class = OrderError
        error_type_field = "order_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        delete_order(context, data["id"])
        return OrderDelete(order_id=data["id"])
