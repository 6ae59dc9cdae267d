from ....order import OrderStatus
from ....order.models import Order
from ...tests.utils import get_graphql_content

ORDER_CREATE_MUTATION = """
    mutation createOrder($input: OrderCreateInput!) {
        orderCreate(input: $input) {
            order {
                id
                status
                reference
                supplier {
                    name
                }
                items {
                    quantity
                    unitPrice {
                        amount
                        currency
                    }
                    totalPrice {
                        amount
                    }
                }
                total {
                    amount
                    currency
                }
            }
            orderErrors {
                field
                code
                message
            }
        }
    }
"""

ORDER_SEND_MUTATION = """
    mutation sendOrder($id: ID!) {
        orderSend(id: $id) {
            order {
                status
                sentAt
            }
            errors {
                code
            }
        }
    }
"""

ORDER_CANCEL_MUTATION = """
    mutation cancelOrder($id: ID!) {
        orderCancel(id: $id) {
            order {
                status
            }
            errors {
                code
                message
            }
        }
    }
"""

ORDER_CLOSE_MUTATION = """
    mutation closeOrder($id: ID!) {
        orderClose(id: $id) {
            order {
                status
                receivedAt
            }
            errors {
                code
            }
        }
    }
"""

ORDER_DELETE_MUTATION = """
    mutation deleteOrder($id: ID!) {
        orderDelete(id: $id) {
            orderId
            errors {
                code
            }
        }
    }
"""


def test_order_create(staff_api_client, supplier, item, second_item):
    # given
    variables = {
        "input": {
            "supplierId": str(supplier.id),
            "reference": "PO-2024-100",
            "currency": "EUR",
            "items": [
                {"itemId": str(item.id), "quantity": 2, "unitPrice": "4.50"},
                {"itemId": str(second_item.id), "quantity": 10},
            ],
        }
    }

    # when
    response = staff_api_client.post_graphql(ORDER_CREATE_MUTATION, variables)

    # then
    content = get_graphql_content(response)
    data = content["data"]["orderCreate"]
    assert not data["orderErrors"]
    order_data = data["order"]
    assert order_data["status"] == "DRAFT"
    assert order_data["reference"] == "PO-2024-100"
    assert order_data["supplier"]["name"] == "VetSupply BV"
    assert order_data["total"] == {"amount": 9.0, "currency": "EUR"}
    prices = sorted(line["totalPrice"]["amount"] for line in order_data["items"])
    assert prices == [0.0, 9.0]
    assert Order.objects.get(pk=order_data["id"]).items.count() == 2


def test_order_create_duplicate_item(staff_api_client, supplier, item):
    # given
    line = {"itemId": str(item.id), "quantity": 1}
    variables = {"input": {"supplierId": str(supplier.id), "items": [line, line]}}

    # when
    response = staff_api_client.post_graphql(ORDER_CREATE_MUTATION, variables)

    # then
    content = get_graphql_content(response)
    data = content["data"]["orderCreate"]
    assert data["order"] is None
    assert data["orderErrors"][0]["code"] == "INVALID"
    assert not Order.objects.exists()


def test_order_send(staff_api_client, draft_order):
    # when
    response = staff_api_client.post_graphql(
        ORDER_SEND_MUTATION, {"id": str(draft_order.id)}
    )

    # then
    content = get_graphql_content(response)
    data = content["data"]["orderSend"]
    assert not data["errors"]
    assert data["order"]["status"] == "SENT"
    assert data["order"]["sentAt"] is not None


def test_order_send_twice(staff_api_client, sent_order):
    # when
    response = staff_api_client.post_graphql(
        ORDER_SEND_MUTATION, {"id": str(sent_order.id)}
    )

    # then
    content = get_graphql_content(response)
    assert content["data"]["orderSend"]["errors"] == [{"code": "INVALID_STATE"}]


def test_order_cancel(staff_api_client, sent_order):
    # when
    response = staff_api_client.post_graphql(
        ORDER_CANCEL_MUTATION, {"id": str(sent_order.id)}
    )

    # then
    content = get_graphql_content(response)
    assert content["data"]["orderCancel"]["order"]["status"] == "CANCELLED"
    sent_order.refresh_from_db()
    assert sent_order.status == OrderStatus.CANCELLED


def test_order_close_partially_received(staff_api_client, order_factory, item):
    # given
    order = order_factory(items=[(item, 5)], status=OrderStatus.PARTIALLY_RECEIVED)

    # when
    response = staff_api_client.post_graphql(
        ORDER_CLOSE_MUTATION, {"id": str(order.id)}
    )

    # then
    content = get_graphql_content(response)
    data = content["data"]["orderClose"]
    assert not data["errors"]
    assert data["order"]["status"] == "RECEIVED"


def test_order_delete_sent_order(staff_api_client, sent_order):
    # when
    response = staff_api_client.post_graphql(
        ORDER_DELETE_MUTATION, {"id": str(sent_order.id)}
    )

    # then
    content = get_graphql_content(response)
    data = content["data"]["orderDelete"]
    assert data["orderId"] is None
    assert data["errors"] == [{"code": "INVALID_STATE"}]
    assert Order.objects.filter(pk=sent_order.pk).exists()


def test_order_delete(staff_api_client, draft_order):
    # when
    response = staff_api_client.post_graphql(
        ORDER_DELETE_MUTATION, {"id": str(draft_order.id)}
    )

    # then
    content = get_graphql_content(response)
    assert content["data"]["orderDelete"]["orderId"] == str(draft_order.id)
    assert not Order.objects.exists()
