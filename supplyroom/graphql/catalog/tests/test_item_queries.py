from ...tests.utils import get_graphql_content

QUERY_ITEM_BY_GTIN = """
    query ItemByGtin($gtin: String!) {
        itemByGtin(gtin: $gtin) {
            name
            sku
            product {
                gtin
            }
            defaultSupplier {
                name
            }
        }
    }
"""


def test_query_item_by_gtin(viewer_api_client, item):
    # when
    response = viewer_api_client.post_graphql(
        QUERY_ITEM_BY_GTIN, {"gtin": "4006381333931"}
    )

    # then
    content = get_graphql_content(response)
    assert content["data"]["itemByGtin"] == {
        "name": "Amoxicillin 250mg",
        "sku": "AMX-250",
        "product": {"gtin": "4006381333931"},
        "defaultSupplier": {"name": "VetSupply BV"},
    }


def test_query_item_by_gtin_of_other_practice(other_practice_api_client, item):
    # when
    response = other_practice_api_client.post_graphql(
        QUERY_ITEM_BY_GTIN, {"gtin": "4006381333931"}
    )

    # then
    content = get_graphql_content(response)
    assert content["data"]["itemByGtin"] is None
