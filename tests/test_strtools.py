import pytest

from sigtalk.strtools import (
    memcmp,
    split,
    strchr,
    strjoin,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split("  hello   world  ", " ") == ["hello", "world"]


def test_split_without_separator_gives_whole_text():
    assert split("hello", ",") == ["hello"]


def test_split_only_separators_gives_nothing():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split("--".join(words), "-") == words


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_none_charset_keeps_text():
    assert strtrim("  keep  ", None) == "  keep  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("-a-b-", "-") == "a-b"


def test_substr_basic():
    assert substr("hello world", 6, 5) == "world"


def test_substr_start_past_end():
    assert substr("abc", 10, 2) == ""


def test_substr_length_clipped_to_text():
    assert substr("abc", 1, 100) == "bc"


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_finds_within_length():
    text = "find the needle here"
    index = strnstr(text, "needle", len(text))
    assert text[index:index + len("needle")] == "needle"


def test_strnstr_match_beyond_length_is_missed():
    text = "find the needle here"
    end = text.index("needle") + len("needle")
    assert strnstr(text, "needle", end - 1) is None
    assert strnstr(text, "needle", end) == text.index("needle")


def test_strnstr_empty_needle_matches_start():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_zero_length_finds_nothing():
    assert strnstr("abc", "a", 0) is None


def test_strncmp_equal_strings():
    assert strncmp("hello", "hello", 5) == 0


def test_strncmp_zero_count():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_ordering_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_only_compares_count():
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_stops_at_nul():
    assert strncmp("ab\0x", "ab\0y", 4) == 0


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apricot", 7) == -strncmp("apricot", "apple", 7)


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_difference_of_bytes():
    assert memcmp(b"\x05", b"\x01", 1) == 0x05 - 0x01


def test_memcmp_does_not_stop_at_nul():
    assert memcmp(b"\0a", b"\0b", 2) < 0


def test_memcmp_short_buffer_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_strchr_first_occurrence():
    text = "banana"
    assert strchr(text, "a") == text.index("a")


def test_strchr_missing():
    assert strchr("banana", "z") is None


def test_strchr_nul_finds_end():
    assert strchr("banana", "\0") == len("banana")


def test_strrchr_last_occurrence():
    text = "banana"
    assert strrchr(text, "a") == text.rindex("a")


def test_strrchr_missing():
    assert strrchr("banana", "z") is None


def test_strrchr_nul_finds_end():
    assert strrchr("banana", "\0") == len("banana")


def test_strchr_rejects_multi_character():
    with pytest.raises(ValueError):
        strchr("banana", "an")


def test_strjoin_concatenates():
    assert strjoin("foo", "bar") == "foobar"


def test_strjoin_missing_parts():
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) == ""


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_strmapi_identity_round_trip():
    text = "unchanged text"
    assert strmapi(text, lambda i, c: c) == text


def test_strmapi_rejects_multi_char_result():
    with pytest.raises(ValueError):
        strmapi("ab", lambda i, c: c * 2)