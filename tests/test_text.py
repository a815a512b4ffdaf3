import pytest

from leetkit.text import (
    compress,
    decode_string,
    is_subsequence,
    is_valid_word,
    is_valid_word_ascii,
    longest_common_prefix,
    max_vowels,
    remove_stars,
    reverse_vowels,
    reverse_words,
)


def _expand(compressed):
    result = []
    index = 0
    while index < len(compressed):
        char = compressed[index]
        index += 1
        digits = ""
        while index < len(compressed) and compressed[index].isdigit():
            digits += compressed[index]
            index += 1
        result.extend(char * (int(digits) if digits else 1))
    return result


# longest_common_prefix

def test_lcp_empty_list():
    assert longest_common_prefix([]) == ""


def test_lcp_single_word():
    assert longest_common_prefix(["alone"]) == "alone"


@pytest.mark.parametrize(
    "words",
    [["flower", "flow", "flight"], ["dog", "racecar", "car"], ["ab", "abc", "abcd"], ["", "x"]],
)
def test_lcp_is_prefix_of_all_and_maximal(words):
    prefix = longest_common_prefix(words)
    assert all(word.startswith(prefix) for word in words)
    n = len(prefix)
    extended = {word[: n + 1] for word in words}
    assert len(extended) > 1 or any(len(word) == n for word in words)


def test_lcp_shorter_word_ends_prefix():
    assert longest_common_prefix(["abcd", "ab"]) == "ab"


# decode_string

def test_decode_nested():
    assert decode_string("3[a2[c]]") == "accaccacc"


def test_decode_sequence():
    assert decode_string("3[a]2[bc]") == "aaabcbc"


def test_decode_plain_text_unchanged():
    assert decode_string("hello") == "hello"


def test_decode_multi_digit_count():
    assert decode_string("12[z]") == "z" * 12


def test_decode_unbalanced_raises():
    with pytest.raises(ValueError):
        decode_string("ab]")


# is_subsequence

def test_is_subsequence_true():
    assert is_subsequence("abc", "ahbgdc") is True


def test_is_subsequence_false():
    assert is_subsequence("axc", "ahbgdc") is False


def test_empty_is_subsequence():
    assert is_subsequence("", "anything") is True
    assert is_subsequence("a", "") is False


def test_order_matters():
    assert is_subsequence("ba", "ab") is False


# max_vowels

def test_max_vowels_window_too_large():
    assert max_vowels("abc", 4) == 0


def test_max_vowels_non_positive_k():
    assert max_vowels("aeiou", 0) == 0


def test_max_vowels_all_vowels():
    assert max_vowels("aeiou", 2) == 2


def test_max_vowels_no_vowels():
    assert max_vowels("rhythm", 3) == 0


@pytest.mark.parametrize("s,k", [("abciiidef", 3), ("leetcode", 3), ("tryhard", 4)])
def test_max_vowels_bounds(s, k):
    result = max_vowels(s, k)
    assert 0 <= result <= k
    assert result <= sum(c in "aeiou" for c in s)


def test_max_vowels_uppercase_not_counted():
    assert max_vowels("AEI", 3) == 0


# remove_stars

def test_remove_stars_no_stars():
    assert remove_stars("abc") == "abc"


def test_remove_stars_removes_left_neighbour():
    assert remove_stars("ab*") == "a"


def test_remove_stars_everything():
    assert remove_stars("ab**") == ""


def test_remove_stars_without_character_raises():
    with pytest.raises(ValueError):
        remove_stars("*a")


# reverse_vowels

@pytest.mark.parametrize("s", ["hello", "leetcode", "AbcE", "xyz", ""])
def test_reverse_vowels_invariants(s):
    result = reverse_vowels(s)
    assert len(result) == len(s)
    for original, new in zip(s, result):
        if original not in "aeiouAEIOU":
            assert new == original
    vowels = [c for c in s if c in "aeiouAEIOU"]
    assert [c for c in result if c in "aeiouAEIOU"] == vowels[::-1]


def test_reverse_vowels_twice_is_identity():
    s = "Programming Is Fun"
    assert reverse_vowels(reverse_vowels(s)) == s


# reverse_words

@pytest.mark.parametrize("s", ["the sky is blue", "  hello world  ", "a good   example"])
def test_reverse_words_order(s):
    result = reverse_words(s)
    assert result.split() == s.split()[::-1]
    assert "  " not in result
    assert result == result.strip()


def test_reverse_words_twice_normalises():
    s = "  a good   example "
    assert reverse_words(reverse_words(s)) == " ".join(s.split())


def test_reverse_words_blank():
    assert reverse_words("   ") == ""


# compress

def test_compress_single_char():
    assert compress(["a"]) == ["a"]


def test_compress_multi_digit_count():
    assert compress(["a"] + ["b"] * 12) == ["a", "b", "1", "2"]


@pytest.mark.parametrize("chars", [list("aabbccc"), list("abc"), list("aaaaaaaaaaab"), []])
def test_compress_round_trip_and_not_longer(chars):
    result = compress(chars)
    assert _expand(result) == chars
    assert len(result) <= len(chars)


def test_compress_accepts_string():
    assert compress("aab") == ["a", "2", "b"]


# is_valid_word

def test_valid_word_example():
    assert is_valid_word("234Adas") is True


def test_valid_word_too_short():
    assert is_valid_word("ab") is False


def test_valid_word_needs_vowel():
    assert is_valid_word("b3c") is False


def test_valid_word_needs_consonant():
    assert is_valid_word("a3e") is False


def test_valid_word_rejects_symbols():
    assert is_valid_word("a3$e") is False


def test_valid_word_accepts_unicode_letters():
    assert is_valid_word("añb") is True
    assert is_valid_word_ascii("añb") is False


def test_valid_word_ascii_example():
    assert is_valid_word_ascii("234Adas") is True


@pytest.mark.parametrize("word", ["ab", "b3c", "a3e", "a3$e", "Hello1"])
def test_ascii_matches_unicode_for_ascii_input(word):
    assert is_valid_word_ascii(word) == is_valid_word(word)