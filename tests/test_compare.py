import pytest

from magmacore.compare import (
    cmp_ends,
    cmp_eq,
    cmp_starts,
    mem_cmp_eq,
    search,
    search_chr,
)

SAMPLES = [b"", b"a", b"A", b"abc", b"ABC", b"abd", b"ab", b"abcd", b"zzz", b"Hello", b"hello", b"\xff"]


def _sign(x):
    return (x > 0) - (x < 0)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_cmp_eq_orders_like_bytes(a, b):
    assert cmp_eq(a, b) == _sign((a > b) - (a < b))
    assert cmp_eq(a, b) == -cmp_eq(b, a)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_cmp_eq_case_insensitive_orders_lowered(a, b):
    la, lb = a.lower(), b.lower()
    assert cmp_eq(a, b, False) == (la > lb) - (la < lb)


def test_cmp_eq_equal_and_case():
    assert cmp_eq("Hello", "Hello") == 0
    assert cmp_eq("Hello", "hELLo", case_sensitive=False) == 0
    assert cmp_eq("Hello", "hello") != 0


def test_none_is_empty():
    assert cmp_eq(None, b"") == 0
    assert cmp_eq(None, b"x") < 0
    assert cmp_starts(b"x", None) > 0


@pytest.mark.parametrize("s", SAMPLES[1:])
@pytest.mark.parametrize("p", SAMPLES[1:])
def test_cmp_starts_zero_iff_prefix(s, p):
    assert (cmp_starts(s, p) == 0) == s.startswith(p)
    assert (cmp_starts(s, p, False) == 0) == s.lower().startswith(p.lower())


def test_cmp_starts_empty_rules():
    assert cmp_starts(b"", b"") == 0
    assert cmp_starts(b"", b"a") < 0
    assert cmp_starts(b"abc", b"") > 0


def test_cmp_starts_longer_prefix_is_greater():
    assert cmp_starts(b"ab", b"abc") < 0
    assert cmp_starts(b"abd", b"abc") > 0


@pytest.mark.parametrize("s", SAMPLES[1:])
@pytest.mark.parametrize("e", SAMPLES[1:])
def test_cmp_ends_zero_iff_suffix(s, e):
    assert (cmp_ends(s, e) == 0) == s.endswith(e)
    assert (cmp_ends(s, e, False) == 0) == s.lower().endswith(e.lower())


@pytest.mark.parametrize("s", SAMPLES)
@pytest.mark.parametrize("e", SAMPLES)
def test_cmp_ends_is_starts_of_reversed(s, e):
    assert cmp_ends(s, e) == cmp_starts(s[::-1], e[::-1])


def test_cmp_ends_compares_backwards():
    assert cmp_ends(b"xa", b"b") < 0
    assert cmp_ends(b"bc", b"abc") < 0
    assert cmp_ends("mail.EXAMPLE.com", "example.com", case_sensitive=False) == 0


@pytest.mark.parametrize("n", range(0, 4))
@pytest.mark.parametrize("a", [b"abc", b"ABD", b"abz"])
@pytest.mark.parametrize("b", [b"abc", b"aBc", b"aaa"])
def test_mem_cmp_eq_compares_prefix(n, a, b):
    assert mem_cmp_eq(a, b, n) == cmp_eq(a[:n], b[:n])
    assert mem_cmp_eq(a, b, n, False) == cmp_eq(a[:n], b[:n], False)


def test_mem_cmp_eq_ignores_trailing_bytes():
    assert mem_cmp_eq(b"abcX", b"abcY", 3) == 0


def test_mem_cmp_eq_none_and_errors():
    assert mem_cmp_eq(None, b"abc", 2) < 0
    assert mem_cmp_eq(b"abc", None, 2) > 0
    with pytest.raises(ValueError):
        mem_cmp_eq(b"ab", b"abc", 3)
    with pytest.raises(ValueError):
        mem_cmp_eq(b"ab", b"ab", -1)


@pytest.mark.parametrize("needle", [b"a", b"lo", b"hello world", b"o w", b"xyz", b"world!"])
def test_search_matches_find(needle):
    hay = b"hello world"
    found = hay.find(needle)
    assert search(hay, needle) == (found if found >= 0 else None)


def test_search_case_insensitive():
    hay = "The Quick Brown Fox"
    assert search(hay, "quick") is None
    assert search(hay, "quick", case_sensitive=False) == hay.lower().find("quick")


def test_search_empty_and_longer_needle():
    assert search(b"", b"a") is None
    assert search(b"abc", b"") is None
    assert search(b"ab", b"abc") is None


def test_search_returns_first_occurrence():
    hay = b"abcabcabc"
    index = search(hay, b"cab")
    assert hay[index:index + 3] == b"cab"
    assert index == hay.find(b"cab")


@pytest.mark.parametrize("needle", ["o", b"o", ord("o")])
def test_search_chr_forms(needle):
    assert search_chr(b"hello world", needle) == b"hello world".index(b"o")


def test_search_chr_missing_and_empty():
    assert search_chr(b"hello", "z") is None
    assert search_chr(b"", "a") is None


def test_search_chr_invalid():
    with pytest.raises(ValueError):
        search_chr(b"abc", 300)
    with pytest.raises(ValueError):
        search_chr(b"abc", "ab")
    with pytest.raises(TypeError):
        search_chr(b"abc", 1.0)


def test_rejects_non_text():
    with pytest.raises(TypeError):
        cmp_eq(123, b"a")