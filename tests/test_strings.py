import pytest

from ftls.strings import (
    bubble_sort,
    find_substring,
    is_alnum,
    is_alpha,
    is_ascii,
    is_blank,
    is_digit,
    is_print,
    is_space,
    lcat,
    lcpy,
    length_cmp,
    split,
    strcmp,
    strncmp,
    substring,
    to_lower,
    to_upper,
    trim,
    trim_char,
)


def test_strcmp_equal_strings():
    assert strcmp("abc", "abc") == 0
    assert strcmp("", "") == 0


def test_strcmp_returns_byte_difference():
    assert strcmp("abd", "abc") == ord("d") - ord("c")
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


def test_strcmp_is_antisymmetric():
    for a, b in [("apple", "apricot"), ("Z", "a"), ("x", "")]:
        assert strcmp(a, b) == -strcmp(b, a)


def test_strncmp_limits_comparison():
    assert strncmp("abcd", "abxy", 2) == 0
    assert strncmp("abcd", "abxy", 3) == ord("c") - ord("x")
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_matches_strcmp_for_large_n():
    assert strncmp("hello", "help", 100) == strcmp("hello", "help")


def test_split_drops_empty_pieces():
    assert split("**hello*world***", "*") == ["hello", "world"]
    assert split("****", "*") == []


def test_trim_removes_whitespace():
    assert trim("  \t hi there \n\v") == "hi there"
    assert trim("   ") == ""


def test_trim_char():
    assert trim_char("xxabcxx", "x") == "abc"
    assert trim_char("xxx", "x") == ""


def test_find_substring_result_is_first_match():
    big, little = "one two two", "two"
    pos = find_substring(big, little, len(big))
    assert big[pos:pos + len(little)] == little
    assert little not in big[:pos + len(little) - 1]


def test_find_substring_respects_length():
    big = "hello world"
    assert find_substring(big, "world", len(big) - 1) is None
    assert find_substring(big, "missing", len(big)) is None


def test_find_substring_empty_cases():
    assert find_substring("", "") == 0
    assert find_substring("", "", 0) is None
    assert find_substring("abc", "", 3) == 0


def test_find_substring_negative_length():
    with pytest.raises(ValueError):
        find_substring("abc", "a", -1)


def test_substring():
    assert substring("abcdef", 2, 3) == "cde"
    assert substring("abc", 1, 10) == "bc"
    assert substring("abc", 3, 2) == ""
    with pytest.raises(IndexError):
        substring("abc", 5, 1)


def test_lcat_with_room():
    dest, src = "abc", "def"
    result, total = lcat(dest, src, 10)
    assert result == dest + src
    assert total == len(dest) + len(src)


def test_lcat_truncates():
    result, total = lcat("abc", "def", 5)
    assert result == "abcd"
    assert total == len("abc") + len("def")


def test_lcat_small_and_zero_size():
    result, _ = lcat("abc", "def", 2)
    assert result == "abc"
    assert lcat("abc", "def", 0) == ("abc", len("abc"))


def test_lcpy():
    assert lcpy("hello", 3) == ("he", len("hello"))
    assert lcpy("hi", 10) == ("hi", len("hi"))


def test_length_cmp():
    assert length_cmp("abcd", "ab") == 2
    assert length_cmp("ab", "ab") == 0
    assert length_cmp("", "abc") == -3


@pytest.mark.parametrize("char", [" ", "\n", "\t", "\r", "\v", "\f"])
def test_whitespace_characters(char):
    assert is_space(char) is True
    assert is_blank(char) is True


@pytest.mark.parametrize("char", ["a", "0", "\0", "_"])
def test_non_whitespace_characters(char):
    assert is_space(char) is False
    assert is_blank(char) is False


def test_classification():
    assert is_alpha("q") and is_alpha("Q") and not is_alpha("1")
    assert is_digit("7") and not is_digit("a")
    assert is_alnum("a") and is_alnum("5") and not is_alnum("-")
    assert is_print(" ") and is_print("~") and not is_print("\x7f")
    assert is_ascii(127) and not is_ascii(128) and not is_ascii(-1)


def test_classification_rejects_long_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_case_conversion():
    assert to_lower("A") == "a"
    assert to_upper("z") == "Z"
    assert to_lower("1") == "1"
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("a")) == ord("a")


def test_bubble_sort():
    assert bubble_sort(["banana", "apple", "Cherry"]) == ["Cherry", "apple", "banana"]
    assert bubble_sort([]) == []


def test_bubble_sort_agrees_with_strcmp():
    items = bubble_sort(["b", "ab", "a", "B", "abc"])
    for left, right in zip(items, items[1:]):
        assert strcmp(left, right) <= 0