import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.chars import to_upper
from libft.text import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

texts = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=127))
letters = st.sampled_from("abcxyz ")


@given(texts)
def test_strlen_matches_len(s):
    assert strlen(s) == len(s)


def test_strlen_rejects_non_str():
    with pytest.raises(TypeError):
        strlen(None)


@given(st.text(alphabet="abc"), st.sampled_from("abcd"))
def test_strchr_finds_first(s, c):
    index = strchr(s, c)
    if c in s:
        assert s[index] == c
        assert c not in s[:index]
    else:
        assert index is None


@given(st.text(alphabet="abc"), st.sampled_from("abcd"))
def test_strrchr_finds_last(s, c):
    index = strrchr(s, c)
    if c in s:
        assert s[index] == c
        assert c not in s[index + 1:]
    else:
        assert index is None


@given(texts)
def test_nul_finds_end(s):
    assert strchr(s, "\0") == len(s)
    assert strrchr(s, 0) == len(s)


def test_strchr_accepts_int_code():
    assert strchr("hello", ord("l")) == strchr("hello", "l")


def test_strchr_rejects_long_needle():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


@given(texts, st.integers(min_value=0, max_value=50))
def test_strncmp_equal_strings(s, n):
    assert strncmp(s, s, n) == 0


@given(texts, texts, st.integers(min_value=0, max_value=50))
def test_strncmp_antisymmetric(a, b, n):
    assert strncmp(a, b, n) == -strncmp(b, a, n)


def test_strncmp_stops_at_n():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_shorter_string_is_less():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("anything", "different", 0) == 0


def test_strncmp_negative_length():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_within_limit():
    assert strnstr("lorem ipsum", "ipsum", 11) == 6
    assert strnstr("lorem ipsum", "ipsum", 10) is None


def test_strnstr_empty_needle():
    assert strnstr("lorem", "", 0) == 0


@given(texts, st.text(alphabet="ab", min_size=1), st.integers(min_value=0, max_value=40))
def test_strnstr_match_is_inside_limit(big, little, n):
    index = strnstr(big, little, n)
    if index is not None:
        assert big[index:index + len(little)] == little
        assert index + len(little) <= n


@given(texts)
def test_strdup_equal(s):
    assert strdup(s) == s


def test_substr_examples():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 10, 2) == ""


@given(texts, st.integers(min_value=0, max_value=30), st.integers(min_value=0, max_value=30))
def test_substr_is_part_of_source(s, start, length):
    result = substr(s, start, length)
    assert len(result) <= length
    assert result in s
    if start < len(s) and length > 0:
        assert result[0] == s[start]


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


@given(texts, texts)
def test_strjoin_concatenates(a, b):
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


@given(st.text(alphabet="xyab"), st.text(alphabet="xy"))
def test_strtrim_removes_ends(s, charset):
    result = strtrim(s, charset)
    assert result in s
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  abc  ", "") == "  abc  "
    assert strtrim("xxx", "x") == ""


def test_split_example():
    assert split("  a  b ", " ") == ["a", "b"]
    assert split("", " ") == []


@given(st.text(alphabet="ab,"))
def test_split_invariants(s):
    parts = split(s, ",")
    assert all(part and "," not in part for part in parts)
    assert "".join(parts) == s.replace(",", "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@given(st.text(alphabet="abcxyz "))
def test_strmapi_upper(s):
    assert strmapi(s, lambda i, c: to_upper(c)) == s.upper()


@given(texts)
def test_strmapi_passes_indices(s):
    seen = []

    def record(i, c):
        seen.append(i)
        return c

    assert strmapi(s, record) == s
    assert seen == list(range(len(s)))


@given(st.lists(letters))
def test_striteri_modifies_in_place(chars):
    original = list(chars)
    striteri(chars, lambda i, c: to_upper(c))
    assert "".join(chars) == "".join(original).upper()


def test_striteri_none_keeps_items():
    items = list("abc")
    seen = []
    striteri(items, lambda i, c: seen.append((i, c)))
    assert items == list("abc")
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_striteri_rejects_str():
    with pytest.raises(TypeError):
        striteri("abc", lambda i, c: c)