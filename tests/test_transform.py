import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.chars import toupper
from ftkit.transform import split, striteri, strjoin, strmapi, strtrim, substr

ascii_text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=127))


@given(ascii_text, st.integers(min_value=0, max_value=60), st.integers(min_value=0, max_value=60))
def test_substr_is_bounded_slice(s, start, length):
    result = substr(s, start, length)
    assert len(result) <= length
    assert result in s
    if start < len(s):
        assert s[start:].startswith(result)
        assert len(result) == min(length, len(s) - start)
    else:
        assert result == ""


def test_substr_example():
    assert substr("hello world", 6, 5) == "world"


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == ""


def test_substr_none():
    assert substr(None, 0, 3) is None


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


@given(ascii_text, ascii_text)
def test_strjoin_concatenates(a, b):
    result = strjoin(a, b)
    assert result.startswith(a)
    assert result[len(a):] == b


def test_strjoin_none():
    assert strjoin(None, "a") is None
    assert strjoin("a", None) is None


@given(ascii_text, st.text(alphabet="abc "))
def test_strtrim_removes_ends(s, charset):
    result = strtrim(s, charset)
    assert result in s
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset
    else:
        assert all(ch in charset for ch in s)


def test_strtrim_example():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  a b  ", "") == "  a b  "


def test_strtrim_none():
    assert strtrim(None, "x") is None
    assert strtrim("x", None) is None


@given(st.text(alphabet="ab "))
def test_split_words_have_no_separator(s):
    words = split(s, " ")
    assert all(word and " " not in word for word in words)
    assert "".join(words) == s.replace(" ", "")


def test_split_example():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_only_separators():
    assert split("   ", " ") == []
    assert split("", " ") == []


def test_split_terminator_separator_keeps_whole():
    assert split("a b", "\0") == ["a b"]


def test_split_none():
    assert split(None, " ") is None


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@given(st.text(alphabet="abcxyzABC"))
def test_strmapi_upper(s):
    assert strmapi(s, lambda _i, c: toupper(c)) == s.upper()


def test_strmapi_passes_indices():
    seen = []
    strmapi("abc", lambda i, c: seen.append((i, c)) or c)
    assert seen == list(enumerate("abc"))


def test_strmapi_none():
    assert strmapi(None, lambda i, c: c) is None


def test_striteri_replaces_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, c: toupper(c) if i % 2 == 0 else None)
    assert chars == ["A", "b", "C", "d"]


def test_striteri_visits_every_index():
    chars = list("hello")
    visited = []
    striteri(chars, lambda i, c: visited.append(i))
    assert visited == list(range(len("hello")))
    assert chars == list("hello")