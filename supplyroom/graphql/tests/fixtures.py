import pytest

from .utils import ApiClient


@pytest.fixture
def staff_api_client(staff_context):
    return ApiClient(staff_context)


@pytest.fixture
def admin_api_client(admin_context):
    return ApiClient(admin_context)


@pytest.fixture
def viewer_api_client(viewer_context):
    return ApiClient(viewer_context)


@pytest.fixture
def other_practice_api_client(other_practice_context):
    return ApiClient(other_practice_context)


@pytest.fixture
def anonymous_api_client(db):
    return ApiClient()
