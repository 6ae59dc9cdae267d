from ....order import OrderStatus
from ...tests.utils import assert_no_permission, get_graphql_content

QUERY_ORDER = """
    query Order($id: ID!) {
        order(id: $id) {
            id
            status
            reference
            items {
                quantity
                item {
                    name
                }
            }
        }
    }
"""

QUERY_ORDERS = """
    query Orders($status: OrderStatusEnum) {
        orders(status: $status) {
            reference
            status
        }
    }
"""


def test_query_order(viewer_api_client, sent_order):
    # when
    response = viewer_api_client.post_graphql(QUERY_ORDER, {"id": str(sent_order.id)})

    # then
    content = get_graphql_content(response)
    data = content["data"]["order"]
    assert data["status"] == "SENT"
    assert data["reference"] == "PO-2024-001"
    assert {(line["item"]["name"], line["quantity"]) for line in data["items"]} == {
        ("Amoxicillin 250mg", 10),
        ("Sterile Gauze 10x10", 5),
    }


def test_query_order_of_other_practice(other_practice_api_client, sent_order):
    # when
    response = other_practice_api_client.post_graphql(
        QUERY_ORDER, {"id": str(sent_order.id)}
    )

    # then
    content = get_graphql_content(response)
    assert content["data"]["order"] is None


def test_query_orders_by_status(viewer_api_client, order_factory, item):
    # given
    order_factory(items=[(item, 1)], reference="PO-SENT")
    order_factory(items=[(item, 1)], status=OrderStatus.DRAFT, reference="PO-DRAFT")
    order_factory(
        items=[(item, 1)],
        status=OrderStatus.PARTIALLY_RECEIVED,
        reference="PO-PARTIAL",
    )

    # when
    response = viewer_api_client.post_graphql(
        QUERY_ORDERS, {"status": "PARTIALLY_RECEIVED"}
    )

    # then
    content = get_graphql_content(response)
    assert content["data"]["orders"] == [
        {"reference": "PO-PARTIAL", "status": "PARTIALLY_RECEIVED"}
    ]


def test_query_orders_without_role(anonymous_api_client, sent_order):
    # when
    response = anonymous_api_client.post_graphql(QUERY_ORDERS)

    # then
    assert_no_permission(response)
