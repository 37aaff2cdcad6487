import pytest

from ftlib.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_matches_length():
    for text in ["", "a", "hello world"]:
        assert strlen(text) == len(text)


def test_strlcpy_fits():
    copy, total = strlcpy("hello", 10)
    assert copy == "hello"
    assert total == len("hello")


def test_strlcpy_truncates_leaving_room_for_terminator():
    copy, total = strlcpy("hello", 3)
    assert copy == "he"
    assert total == len("hello")


def test_strlcpy_zero_size():
    copy, total = strlcpy("hello", 0)
    assert copy == ""
    assert total == len("hello")


def test_strlcpy_negative_size_raises():
    with pytest.raises(ValueError):
        strlcpy("x", -1)


def test_strlcat_fits():
    result, total = strlcat("foo", "bar", 20)
    assert result == "foobar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates():
    result, total = strlcat("foo", "bar", 5)
    assert result == "foob"
    assert total == len("foo") + len("bar")


def test_strlcat_dest_too_long():
    result, total = strlcat("foobar", "xy", 3)
    assert result == "foobar"
    assert total == len("xy") + 3


def test_strchr_finds_first():
    text = "banana"
    index = strchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]


def test_strchr_missing_and_terminator():
    assert strchr("banana", "z") is None
    assert strchr("banana", "\0") == len("banana")
    assert strchr("banana", 0) == len("banana")


def test_strchr_int_argument():
    assert strchr("banana", ord("n")) == strchr("banana", "n")


def test_strrchr_finds_last():
    text = "banana"
    index = strrchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[index + 1:]
    assert strrchr(text, "q") is None
    assert strrchr(text, "\0") == len(text)


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abcd", "abce", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign_and_value():
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")
    assert strncmp("abc", "abd", 3) < 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_basic():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index:index + len("world")] == "world"


def test_strnstr_limits():
    haystack = "hello world"
    assert strnstr(haystack, "world", 8) is None
    assert strnstr(haystack, "", 0) == 0
    assert strnstr(haystack, "hello", 4) is None
    assert strnstr(haystack, "zzz", len(haystack)) is None


def test_strdup_equal():
    assert strdup("copy me") == "copy me"


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 50, 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_strtrim():
    assert strtrim("  xx hi xx  ", " x") == "hi"
    assert strtrim("abc", "abc") == ""
    assert strtrim(" a ", "") == " a "


def test_split_drops_empty_words():
    assert split(",,a,b,,c,", ",") == ["a", "b", "c"]
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_roundtrip():
    words = ["one", "two", "three"]
    assert split(" ".join(words), " ") == words
    assert split("no separators", "\0") == ["no separators"]


def test_strmapi_uses_index():
    result = strmapi("abc", lambda i, ch: ch * (i + 1))
    assert result == "abbccc"


def test_strmapi_preserves_length_for_identity():
    text = "identity"
    assert strmapi(text, lambda i, ch: ch) == text


def test_striteri_modifies_in_place():
    chars = list("abcd")
    returned = striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert returned is chars
    assert "".join(chars) == "AbCd"


def test_striteri_sees_every_index():
    seen = []
    striteri(list("xyz"), lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("xyz"))