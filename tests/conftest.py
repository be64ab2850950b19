import pytest

from tinystore import ErrorHandler
from tinystore.todos import create_app_store


@pytest.fixture
def error_handler():
    return ErrorHandler()


@pytest.fixture
def store(error_handler):
    return create_app_store(error_handler=error_handler)
