import pytest

from pheasant.errors import ErrorKind, PheasantError
from pheasant.methods import HttpMethod


@pytest.mark.parametrize(
    "name",
    ["HEAD", "GET", "POST", "PUT", "PATCH", "DELETE", "CONNECT", "OPTIONS", "TRACE"],
)
def test_from_str_round_trip(name):
    assert HttpMethod.from_str(name).value == name


@pytest.mark.parametrize("name", ["get", "", "FETCH", " GET"])
def test_from_str_rejects_unknown(name):
    with pytest.raises(PheasantError) as info:
        HttpMethod.from_str(name)
    assert info.value.kind is ErrorKind.BAD_METHOD_NAME