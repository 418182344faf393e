import pytest

from digraph_lib import KINDS, empty, rep_checks


@pytest.fixture(autouse=True, scope="session")
def checked_rep():
    with rep_checks(True):
        yield


@pytest.fixture(params=KINDS)
def empty_instance(request):
    return empty(request.param)
