import pytest

from pushswap.strings import (
    count_words,
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


def test_strlen():
    assert strlen("") == 0
    assert strlen("push swap") == len("push swap")


def test_strchr_finds_first():
    s = "banana"
    assert strchr(s, "a") == s.index("a")
    assert strchr(s, ord("n")) == s.index("n")
    assert strchr(s, "z") is None


def test_strchr_nul_is_terminator():
    assert strchr("abc", "\0") == 3
    assert strchr("abc", 0) == 3


def test_strrchr_finds_last():
    s = "banana"
    assert strrchr(s, "a") == s.rindex("a")
    assert strrchr(s, "q") is None
    assert strrchr(s, 0) == len(s)


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 10) > 0
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr():
    big = "Foo Bar Baz"
    assert strnstr(big, "", 0) == 0
    assert strnstr(big, "Bar", len(big)) == big.index("Bar")
    assert strnstr(big, "Bar", big.index("Bar") + 2) is None
    assert strnstr(big, "Bar", big.index("Bar") + 3) == big.index("Bar")
    assert strnstr(big, "Qux", 100) is None


def test_strlcpy():
    src = "hello world"
    assert strlcpy(src, 0) == ("", len(src))
    assert strlcpy(src, 6) == (src[:5], len(src))
    assert strlcpy(src, 100) == (src, len(src))


def test_strlcat_fits():
    result, total = strlcat("push", "_swap", 20)
    assert result == "push_swap"
    assert total == len("push_swap")


def test_strlcat_truncates():
    result, total = strlcat("abc", "defgh", 6)
    assert result == "abcde"
    assert total == len("abc") + len("defgh")


def test_strlcat_size_smaller_than_dst():
    result, total = strlcat("abcdef", "xyz", 3)
    assert result == "abcdef"
    assert total == 3 + len("xyz")


def test_strdup_equal():
    s = "copy me"
    assert strdup(s) == s
    assert strdup("") == ""


def test_substr():
    s = "hello"
    assert substr(s, 1, 3) == s[1:4]
    assert substr(s, 2, 100) == s[2:]
    assert substr(s, 10, 3) == ""
    assert substr(s, 5, 3) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("push", "swap") == "pushswap"
    assert strjoin("", "") == ""
    with pytest.raises(TypeError):
        strjoin(None, "a")


def test_strtrim():
    assert strtrim("  xx hi xx  ", " x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("abc", "") == "abc"
    assert strtrim(" a b ", " ") == "a b"


def test_split_and_count_words():
    s = "  3  -1 42   7 "
    words = split(s, " ")
    assert words == ["3", "-1", "42", "7"]
    assert count_words(s, " ") == len(words)
    assert split("", " ") == []
    assert count_words("   ", " ") == 0


def test_split_join_round_trip():
    words = ["1", "22", "333"]
    assert split(" ".join(words), " ") == words


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strmapi():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("aaa", lambda i, c: str(i)) == "012"
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_modifies_in_place():
    chars = list("abcd")
    seen = []

    def upper_even(index, seq):
        seen.append(index)
        if index % 2 == 0:
            seq[index] = seq[index].upper()

    assert striteri(chars, upper_even) is None
    assert "".join(chars) == "AbCd"
    assert seen == [0, 1, 2, 3]