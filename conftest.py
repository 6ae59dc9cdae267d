# pytest_plugins can only be defined in the top-level conftest.py
pytest_plugins = [
    "supplyroom.tests.fixtures",
    "supplyroom.graphql.tests.fixtures",
]
