import pytest

from cubraycast.strings import (
    split,
    strchr,
    strcmp,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def _sign(value):
    return (value > 0) - (value < 0)


# strchr / strrchr

def test_strchr_finds_first():
    text = "north.xpm"
    assert strchr(text, "o") == text.index("o")


def test_strchr_missing_is_none():
    assert strchr("abc", "z") is None


def test_strchr_nul_finds_end():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strchr_integer_code_wraps():
    assert strchr("xAy", ord("A") + 256) == 1


def test_strrchr_finds_last():
    text = "a,b,c"
    assert strrchr(text, ",") == text.rindex(",")


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "q") is None
    assert strrchr("abc", "\0") == 3


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


# comparisons

@pytest.mark.parametrize(
    "a, b",
    [("abc", "abc"), ("abc", "abd"), ("abd", "abc"), ("ab", "abc"), ("abc", "ab"), ("", "")],
)
def test_strcmp_sign_matches_python_ordering(a, b):
    expected = (a > b) - (a < b)
    assert _sign(strcmp(a, b)) == expected


def test_strcmp_difference_value():
    assert strcmp("a", "b") == ord("a") - ord("b")


def test_strcmp_shorter_string_uses_zero():
    assert strcmp("ab", "abc") == -ord("c")


def test_strncmp_limits_comparison():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) < 0


def test_strncmp_zero_length_is_equal():
    assert strncmp("x", "y", 0) == 0


def test_strncmp_negative_raises():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


# strnstr

def test_strnstr_finds_within_length():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", len(big)) == big.index("Bar")


def test_strnstr_match_must_fit():
    big = "Foo Bar Baz"
    start = big.index("Bar")
    assert strnstr(big, "Bar", start + 2) is None
    assert strnstr(big, "Bar", start + 3) == start


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_not_found():
    assert strnstr("abc", "zz", 3) is None


# substr

def test_substr_basic():
    assert substr("hello world", 6, 5) == "world"


def test_substr_start_past_end():
    assert substr("abc", 10, 2) == ""


def test_substr_length_clamped():
    text = "abcdef"
    assert substr(text, 2, 100) == text[2:]


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


# strjoin / strtrim

def test_strjoin_concatenates():
    assert strjoin("./textures/", "north.xpm") == "./textures/north.xpm"


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("  \tpath.xpm \n", " \t\n") == "path.xpm"


def test_strtrim_everything_trimmed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_charset_unchanged():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("xaxbx", "x") == "axb"


# split

def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_rgb():
    assert split("220,100,0", ",") == ["220", "100", "0"]


def test_split_only_separators():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_round_trip_without_empties():
    words = ["one", "two", "three"]
    assert split(",".join(words), ",") == words


# strmapi / striteri

def test_strmapi_uses_index_and_char():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_strmapi_identity():
    text = "1111N0001"
    assert strmapi(text, lambda i, ch: ch) == text


def test_striteri_modifies_in_place():
    chars = list("10N1")
    striteri(chars, lambda i, ch: "0" if ch == "N" else None)
    assert chars == list("1001")


def test_striteri_sees_every_index():
    seen = []
    chars = list("abc")
    striteri(chars, lambda i, ch: seen.append((i, ch)))
    assert seen == [(0, "a"), (1, "b"), (2, "c")]
    assert chars == list("abc")


# strlcpy / strlcat

def test_strlcpy_truncates_and_reports_length():
    src = "abcdef"
    copied, total = strlcpy(src, 4)
    assert copied == src[:3]
    assert total == len(src)


def test_strlcpy_size_zero():
    assert strlcpy("abc", 0) == ("", 3)


def test_strlcpy_fits():
    assert strlcpy("abc", 10) == ("abc", 3)


def test_strlcat_appends_within_size():
    result, total = strlcat("abc", "def", 10)
    assert result == "abcdef"
    assert total == len("abc") + len("def")


def test_strlcat_truncates():
    result, total = strlcat("abc", "def", 5)
    assert result == "abcd"
    assert len(result) == 5 - 1
    assert total == 6


def test_strlcat_size_not_larger_than_dst():
    assert strlcat("abcdef", "xy", 4) == ("abcdef", 4 + 2)


def test_strlcat_size_zero():
    assert strlcat("abc", "xy", 0) == ("abc", 2)


def test_strlcat_negative_raises():
    with pytest.raises(ValueError):
        strlcat("a", "b", -3)