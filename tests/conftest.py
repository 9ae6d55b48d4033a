import pytest

from gencolormap.types import MapType
from gencolormap.defaults import resolve_params


@pytest.fixture(params=list(MapType), ids=lambda m: m.value)
def map_type(request):
    """Every color map family."""
    return request.param


@pytest.fixture
def default_params():
    """Factory: default parameters of a family for n colors."""
    def make(map_type, n, **overrides):
        return resolve_params(map_type, n, **overrides)
    return make

