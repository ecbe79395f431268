"""Exact pattern matching: Knuth-Morris-Pratt and Rabin-Karp."""

from __future__ import annotations

ALPHABET_SIZE = 127
DEFAULT_MODULUS = 101


def _require_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def compute_lps(pattern: str) -> list[int]:
    """Longest proper prefix that is also a suffix, for every prefix of ``pattern``."""
    _require_pattern(pattern)
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Start indices of every (possibly overlapping) occurrence of ``pattern``."""
    lps = compute_lps(pattern)
    size = len(pattern)
    matches: list[int] = []
    matched = 0
    for i, char in enumerate(text):
        while matched and pattern[matched] != char:
            matched = lps[matched - 1]
        if pattern[matched] == char:
            matched += 1
        if matched == size:
            matches.append(i - size + 1)
            matched = lps[matched - 1]
    return matches


def rabin_karp_search(text: str, pattern: str, modulus: int = DEFAULT_MODULUS) -> list[int]:
    """Start indices of ``pattern`` in ``text`` using a rolling hash modulo ``modulus``."""
    _require_pattern(pattern)
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    size, length = len(pattern), len(text)
    if size > length:
        return []

    high = pow(ALPHABET_SIZE, size - 1, modulus)
    pattern_hash = window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (ALPHABET_SIZE * pattern_hash + ord(p_char)) % modulus
        window_hash = (ALPHABET_SIZE * window_hash + ord(t_char)) % modulus

    matches: list[int] = []
    for start in range(length - size + 1):
        if pattern_hash == window_hash and text[start:start + size] == pattern:
            matches.append(start)
        if start < length - size:
            window_hash = (
                ALPHABET_SIZE * (window_hash - ord(text[start]) * high)
                + ord(text[start + size])
            ) % modulus
    return matches