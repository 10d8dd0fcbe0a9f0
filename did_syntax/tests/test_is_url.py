import pytest

from did_syntax import ParsedDID


def test_is_url_bare_did():
    assert not ParsedDID(method="example", id="123").is_url()


@pytest.mark.parametrize(
    "extra",
    [
        {"path": "a/b"},
        {"path_segments": ["a", "b"]},
        {"query": "abc"},
        {"fragment": "00000"},
        {"path": "a/b", "fragment": "00000"},
    ],
)
def test_is_url(extra: dict):
    assert ParsedDID(method="example", id="123", **extra).is_url()
