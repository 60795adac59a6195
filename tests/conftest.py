import pytest

from route_navigator.catalog import Catalog
from route_navigator.models import AccessibilityProfile


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def piazza(catalog):
    return catalog.list_points_of_interest()[0]


@pytest.fixture
def castello(catalog):
    return catalog.list_points_of_interest()[1]


@pytest.fixture
def wheelchair():
    return AccessibilityProfile.WHEELCHAIR
