import pytest

from ftlib import strings


def test_strlen_matches_len():
    text = "Hello, World!"
    assert strings.strlen(text) == len(text)
    assert strings.strlen("") == 0


def test_strlcpy_truncates_and_reports_source_length():
    src = "Hello, World!"
    copied, total = strings.strlcpy(src, 20)
    assert copied == src
    assert total == len(src)
    copied, total = strings.strlcpy(src, 6)
    assert copied == src[:5]
    assert total == len(src)


def test_strlcpy_zero_size_copies_nothing():
    assert strings.strlcpy("abc", 0) == ("", 3)


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strings.strlcpy("abc", -1)


def test_strlcat_appends_within_size():
    dst, src = "hi", "world!"
    result, total = strings.strlcat(dst, src, 20)
    assert result == dst + src
    assert total == len(dst) + len(src)


def test_strlcat_truncates():
    src = "lorem ipsum dolor sit amet"
    result, total = strings.strlcat("ab", src, 6)
    assert result == "ab" + src[:3]
    assert len(result) == 5
    assert total == 2 + len(src)


def test_strlcat_size_smaller_than_dst():
    result, total = strings.strlcat("hello", "world!", 2)
    assert result == "hello"
    assert total == 2 + len("world!")


def test_strchr_finds_first():
    text = "sallaba du ba"
    index = strings.strchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]
    assert strings.strchr(text, "z") is None


def test_strchr_nul_points_to_end():
    text = "sallaba du "
    assert strings.strchr(text, "\0") == len(text)
    assert strings.strchr(text, 0) == len(text)


def test_strchr_accepts_int_code():
    text = "Oh this wonderful morning"
    assert strings.strchr(text, ord("m")) == text.index("m")


def test_strrchr_finds_last():
    text = "sallaba du ba"
    index = strings.strrchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[index + 1:]
    assert strings.strrchr(text, "q") is None
    assert strings.strrchr("", "\0") == 0


def test_strncmp_sign_and_limit():
    assert strings.strncmp("abcdef", "abcxyz", 3) == 0
    assert strings.strncmp("abcdef", "abcxyz", 4) == -1
    assert strings.strncmp("abz", "abc", 3) == 1
    assert strings.strncmp("abc", "xyz", 0) == 0
    assert strings.strncmp("ab", "abc", 5) == -1


def test_strcmp_returns_difference():
    assert strings.strcmp("abc", "abc") == 0
    assert strings.strcmp("abd", "abc") == ord("d") - ord("c")
    assert strings.strcmp("ab", "abc") == -ord("c")
    assert strings.strcmp("abc", "ab") == ord("c")


def test_strstr():
    haystack = "hay hay hay hay needle hay"
    index = strings.strstr(haystack, "needle")
    assert haystack[index:].startswith("needle")
    assert strings.strstr(haystack, "pin") is None
    assert strings.strstr(haystack, "") == 0


def test_strnstr_respects_length():
    haystack = "hay hay hay hay needle hay"
    needle = "needle"
    index = strings.strnstr(haystack, needle, 24)
    assert haystack[index:].startswith(needle)
    end = haystack.index(needle) + len(needle)
    assert strings.strnstr(haystack, needle, end) == index
    assert strings.strnstr(haystack, needle, end - 1) is None
    assert strings.strnstr(haystack, "", 0) == 0


def test_strdup_equal_copy():
    assert strings.strdup("Hello, World!") == "Hello, World!"


def test_substr():
    text = "Hello, World!"
    assert strings.substr(text, 3, 13) == text[3:]
    assert strings.substr(text, 0, 5) == text[:5]
    assert strings.substr(text, len(text), 4) == ""
    assert strings.substr(text, 100, 4) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        strings.substr("abc", -1, 2)


def test_strjoin():
    assert strings.strjoin("hi", "world!") == "hiworld!"
    assert strings.strjoin("", "") == ""


def test_strtrim():
    assert strings.strtrim("   \t \n  \t\n    ", " \t\n") == ""
    assert strings.strtrim("xxhixx", "x") == "hi"
    assert strings.strtrim("", "x") == ""
    assert strings.strtrim(" a ", "") == " a "


def test_strtrim_none():
    with pytest.raises(TypeError):
        strings.strtrim(None, "x")
    with pytest.raises(TypeError):
        strings.strtrim("x", None)


def test_strmapi_uses_index():
    text = "abcdef"
    result = strings.strmapi(text, lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert len(result) == len(text)
    assert result.lower() == text
    assert result[0] == "A" and result[1] == "b"


def test_striteri_visits_in_order():
    calls = []
    strings.striteri("abc", lambda i, ch: calls.append((i, ch)))
    assert calls == [(0, "a"), (1, "b"), (2, "c")]


def test_striteri_modifies_mutable_sequence():
    chars = list("abc")
    strings.striteri(chars, lambda i, ch: ch.upper() if i == 1 else None)
    assert chars == ["a", "B", "c"]


def test_split_drops_empty_words():
    assert strings.split("  hello  world ", " ") == ["hello", "world"]
    assert strings.split("", " ") == []
    assert strings.split(",,,", ",") == []
    assert strings.split("a,b", ord(",")) == ["a", "b"]


def test_split_roundtrip():
    words = ["hay", "needle", "hay"]
    assert strings.split(" ".join(words), " ") == words


def test_split_none():
    with pytest.raises(TypeError):
        strings.split(None, " ")