from ....inventory.models import InventoryTransfer, LocationInventory, StockAdjustment
from ...tests.utils import get_graphql_content

STOCK_ADJUST_MUTATION = """
    mutation adjustStock($input: StockAdjustInput!) {
        stockAdjust(input: $input) {
            stockAdjustment {
                quantity
                reason
                note
            }
            locationInventory {
                quantity
                isBelowReorderPoint
            }
            stockErrors {
                field
                code
                message
            }
        }
    }
"""

STOCK_TRANSFER_MUTATION = """
    mutation transferStock($input: StockTransferInput!) {
        stockTransfer(input: $input) {
            inventoryTransfer {
                quantity
                fromLocation {
                    name
                }
                toLocation {
                    name
                }
            }
            errors {
                field
                code
            }
        }
    }
"""

REORDER_SETTINGS_UPDATE_MUTATION = """
    mutation updateReorderSettings($input: ReorderSettingsInput!) {
        reorderSettingsUpdate(input: $input) {
            locationInventory {
                quantity
                reorderPoint
                reorderQuantity
                isBelowReorderPoint
            }
            errors {
                field
                code
            }
        }
    }
"""


def test_stock_adjust(staff_api_client, location, item, inventory_factory):
    # given
    inventory_factory(location, item, quantity=10, reorder_point=8)
    variables = {
        "input": {
            "locationId": str(location.id),
            "itemId": str(item.id),
            "quantity": -4,
            "reason": "Expired",
            "note": "Found in the back",
        }
    }

    # when
    response = staff_api_client.post_graphql(STOCK_ADJUST_MUTATION, variables)

    # then
    content = get_graphql_content(response)
    data = content["data"]["stockAdjust"]
    assert not data["stockErrors"]
    assert data["stockAdjustment"] == {
        "quantity": -4,
        "reason": "Expired",
        "note": "Found in the back",
    }
    assert data["locationInventory"] == {"quantity": 6, "isBelowReorderPoint": True}


def test_stock_adjust_below_zero(staff_api_client, location, item, inventory_factory):
    # given
    inventory_factory(location, item, quantity=3)
    variables = {
        "input": {
            "locationId": str(location.id),
            "itemId": str(item.id),
            "quantity": -5,
        }
    }

    # when
    response = staff_api_client.post_graphql(STOCK_ADJUST_MUTATION, variables)

    # then
    content = get_graphql_content(response)
    data = content["data"]["stockAdjust"]
    assert data["stockAdjustment"] is None
    assert data["stockErrors"] == [
        {
            "field": "quantity",
            "code": "NEGATIVE_STOCK",
            "message": "Adjustment would result in negative quantity (3 + -5 = -2)",
        }
    ]
    assert LocationInventory.objects.get(location=location, item=item).quantity == 3
    assert not StockAdjustment.objects.exists()


def test_stock_transfer(
    staff_api_client, location, second_location, item, inventory_factory
):
    # given
    inventory_factory(location, item, quantity=10)
    variables = {
        "input": {
            "itemId": str(item.id),
            "fromLocationId": str(location.id),
            "toLocationId": str(second_location.id),
            "quantity": 4,
        }
    }

    # when
    response = staff_api_client.post_graphql(STOCK_TRANSFER_MUTATION, variables)

    # then
    content = get_graphql_content(response)
    data = content["data"]["stockTransfer"]
    assert not data["errors"]
    assert data["inventoryTransfer"]["fromLocation"]["name"] == "Main Storage"
    assert data["inventoryTransfer"]["toLocation"]["name"] == "Surgery Cabinet"
    assert LocationInventory.objects.get(location=location).quantity == 6
    assert LocationInventory.objects.get(location=second_location).quantity == 4


def test_stock_transfer_insufficient_stock(
    staff_api_client, location, second_location, item, inventory_factory
):
    # given
    inventory_factory(location, item, quantity=1)
    variables = {
        "input": {
            "itemId": str(item.id),
            "fromLocationId": str(location.id),
            "toLocationId": str(second_location.id),
            "quantity": 4,
        }
    }

    # when
    response = staff_api_client.post_graphql(STOCK_TRANSFER_MUTATION, variables)

    # then
    content = get_graphql_content(response)
    data = content["data"]["stockTransfer"]
    assert data["errors"] == [{"field": "quantity", "code": "BUSINESS_RULE"}]
    assert not InventoryTransfer.objects.exists()


def test_reorder_settings_update(staff_api_client, location, item, inventory_factory):
    # given
    inventory_factory(location, item, quantity=2)
    variables = {
        "input": {
            "locationId": str(location.id),
            "itemId": str(item.id),
            "reorderPoint": 5,
            "reorderQuantity": 20,
        }
    }

    # when
    response = staff_api_client.post_graphql(
        REORDER_SETTINGS_UPDATE_MUTATION, variables
    )

    # then
    content = get_graphql_content(response)
    data = content["data"]["reorderSettingsUpdate"]
    assert not data["errors"]
    assert data["locationInventory"] == {
        "quantity": 2,
        "reorderPoint": 5,
        "reorderQuantity": 20,
        "isBelowReorderPoint": True,
    }


def test_reorder_settings_update_as_viewer(
    viewer_api_client, location, item, inventory_factory
):
    # given
    inventory_factory(location, item, quantity=2)
    variables = {
        "input": {
            "locationId": str(location.id),
            "itemId": str(item.id),
            "reorderPoint": 5,
        }
    }

    # when
    response = viewer_api_client.post_graphql(
        REORDER_SETTINGS_UPDATE_MUTATION, variables
    )

    # then
    content = get_graphql_content(response)
    data = content["data"]["reorderSettingsUpdate"]
    assert data["errors"] == [{"field": None, "code": "FORBIDDEN"}]
