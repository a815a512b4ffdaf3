"""String problems: prefixes, decoding, stacks, windows and validation."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable

_VOWELS = frozenset("aeiouAEIOU")
_LOWER_VOWELS = frozenset("aeiou")


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Return the longest prefix shared by every string; empty input gives ''."""
    words = list(strs)
    if not words:
        return ""
    first = words[0]
    for index, char in enumerate(first):
        for other in words[1:]:
            if index >= len(other) or other[index] != char:
                return first[:index]
    return first


def decode_string(s: str) -> str:
    """Expand an encoded string such as ``3[a2[c]]`` into ``accaccacc``."""
    stack: list[tuple[str, int]] = []
    current = ""
    number = 0
    for char in s:
        if "0" <= char <= "9":
            number = number * 10 + int(char)
        elif char == "[":
            stack.append((current, number))
            current, number = "", 0
        elif char == "]":
            if not stack:
                raise ValueError("unbalanced ']' in encoded string")
            previous, repeat = stack.pop()
            current = previous + current * repeat
        else:
            current += char
    return current


def is_subsequence(s: str, t: str) -> bool:
    """Return True if ``s`` appears in ``t`` in order, not necessarily contiguously."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def max_vowels(s: str, k: int) -> int:
    """Return the most lowercase vowels in any window of length k."""
    if k > len(s) or k < 1:
        return 0
    count = sum(1 for char in s[:k] if char in _LOWER_VOWELS)
    best = count
    for outgoing, incoming in zip(s, s[k:]):
        count += (incoming in _LOWER_VOWELS) - (outgoing in _LOWER_VOWELS)
        best = max(best, count)
    return best


def remove_stars(s: str) -> str:
    """Delete each ``*`` together with the nearest non-star character to its left."""
    stack: list[str] = []
    for char in s:
        if char == "*":
            if not stack:
                raise ValueError("star with no character to remove")
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def reverse_vowels(s: str) -> str:
    """Return ``s`` with the order of its vowels reversed."""
    chars = list(s)
    left, right = 0, len(chars) - 1
    while left < right:
        while left < right and chars[left] not in _VOWELS:
            left += 1
        while left < right and chars[right] not in _VOWELS:
            right -= 1
        if left < right:
            chars[left], chars[right] = chars[right], chars[left]
            left += 1
            right -= 1
    return "".join(chars)


def reverse_words(s: str) -> str:
    """Return the whitespace-separated words of ``s`` in reverse order, single-spaced."""
    return " ".join(reversed(s.split()))


def compress(chars: Iterable[str]) -> list[str]:
    """Run-length compress characters: each run becomes the character and, if longer than one, its count's digits."""
    result: list[str] = []
    for char, run in groupby(chars):
        result.append(char)
        count = sum(1 for _ in run)
        if count > 1:
            result.extend(str(count))
    return result


def is_valid_word(word: str) -> bool:
    """Return True if the word is at least 3 bytes of letters and digits with a vowel and a consonant."""
    # Length is measured in UTF-8 bytes.
    if len(word.encode("utf-8")) < 3:
        return False
    has_vowel = has_consonant = False
    for char in word:
        if char.isalpha():
            if char.lower() in _LOWER_VOWELS:
                has_vowel = True
            else:
                has_consonant = True
        elif not char.isdecimal():
            return False
    return has_vowel and has_consonant


def is_valid_word_ascii(word: str) -> bool:
    """Like :func:`is_valid_word`, but only ASCII letters and digits are allowed."""
    if len(word.encode("utf-8")) < 3:
        return False
    has_vowel = has_consonant = False
    for char in word:
        if ("a" <= char <= "z") or ("A" <= char <= "Z"):
            if char in _VOWELS:
                has_vowel = True
            else:
                has_consonant = True
        elif not ("0" <= char <= "9"):
            return False
    return has_vowel and has_consonant