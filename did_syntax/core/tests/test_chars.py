import pytest

from did_syntax.core import chars


def test_method_chars():
    for c in "0123456789abcdefghijklmnopqrstuvwxyz":
        assert chars.is_method_char(c)
    for c in "A-_.:%/ ":
        assert not chars.is_method_char(c)


def test_id_chars():
    for c in "aZ9.-_":
        assert chars.is_id_char(c)
    for c in ":%/?#&^ ~":
        assert not chars.is_id_char(c)


def test_path_and_query_chars():
    for c in "aZ9-._~!$&'()*+,;=:@/":
        assert chars.is_path_char(c)
        assert chars.is_query_char(c)
    assert chars.is_query_char("?")
    assert not chars.is_path_char("?")
    for c in "#^%[] ":
        assert not chars.is_path_char(c)
        assert not chars.is_query_char(c)


def test_character_predicates():
    assert chars.is_digit("7")
    assert not chars.is_digit("a")
    assert chars.is_lower_alpha("q")
    assert not chars.is_lower_alpha("Q")
    assert chars.is_alpha("Q")
    assert chars.is_hex_digit("F")
    assert chars.is_hex_digit("a")
    assert not chars.is_hex_digit("g")


@pytest.mark.parametrize(
    "text,index,expect",
    [
        ("%20", 0, True),
        ("a%3Ab", 1, True),
        ("%aF", 0, True),
        ("%", 0, False),
        ("%a", 0, False),
        ("%A%", 0, False),
        ("%!*", 0, False),
        ("%g0", 0, False),
        ("a20", 0, False),
    ],
)
def test_is_pct_encoded(text: str, index: int, expect: bool):
    assert chars.is_pct_encoded(text, index) is expect
