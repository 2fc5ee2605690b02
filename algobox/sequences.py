"""Dynamic programmes over strings and sequences: LIS, LCS and its relatives, edit distance."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any


def length_of_lis(nums: Iterable[Any]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[Any] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def longest_palindromic_substring_length(text: str) -> int:
    """Length of the longest contiguous palindrome in ``text``."""
    n = len(text)
    best = 0
    for center in range(2 * n - 1):
        left, right = center // 2, (center + 1) // 2
        while left >= 0 and right < n and text[left] == text[right]:
            left -= 1
            right += 1
        best = max(best, right - left - 1)
    return best


def edit_distance(a: str, b: str) -> int:
    """Fewest single-character inserts, deletes and replacements turning ``a`` into ``b``."""
    previous = list(range(len(b) + 1))
    for i, x in enumerate(a, 1):
        current = [i]
        for j, y in enumerate(b, 1):
            if x == y:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def is_interleave(s1: str, s2: str, s3: str) -> bool:
    """Whether ``s3`` is formed by interleaving ``s1`` and ``s2`` keeping each one's order."""
    m, n = len(s1), len(s2)
    if m + n != len(s3):
        return False
    row = [True] * (n + 1)
    for j in range(1, n + 1):
        row[j] = row[j - 1] and s2[j - 1] == s3[j - 1]
    for i in range(1, m + 1):
        row[0] = row[0] and s1[i - 1] == s3[i - 1]
        for j in range(1, n + 1):
            row[j] = (row[j - 1] and s2[j - 1] == s3[i + j - 1]) or (
                row[j] and s1[i - 1] == s3[i + j - 1]
            )
    return row[n]


def _lcs_table(a: Sequence[Any], b: Sequence[Any]) -> list[list[int]]:
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a, 1):
        row, above = table[i], table[i - 1]
        for j, y in enumerate(b, 1):
            row[j] = above[j - 1] + 1 if x == y else max(row[j - 1], above[j])
    return table


def lcs_length(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Length of the longest common subsequence of ``a`` and ``b``."""
    return _lcs_table(a, b)[len(a)][len(b)]


def longest_common_subsequence(a: str, b: str) -> str:
    """One longest common subsequence of ``a`` and ``b``."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    picked: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(picked))


def longest_common_substring(a: str, b: str) -> int:
    """Length of the longest contiguous run shared by ``a`` and ``b``."""
    best = 0
    previous = [0] * (len(b) + 1)
    for x in a:
        current = [0] * (len(b) + 1)
        for j, y in enumerate(b, 1):
            if x == y:
                current[j] = previous[j - 1] + 1
                best = max(best, current[j])
        previous = current
    return best


def longest_palindromic_subsequence(text: str) -> int:
    """Length of the longest subsequence of ``text`` that reads the same both ways."""
    return lcs_length(text, text[::-1])


def longest_repeating_subsequence(text: str) -> int:
    """Length of the longest subsequence occurring twice at disjoint positions."""
    n = len(text)
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            if text[i - 1] == text[j - 1] and i != j:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i][j - 1], table[i - 1][j])
    return table[n][n]


def min_deletions_to_palindrome(text: str) -> int:
    """Fewest characters to delete so that ``text`` becomes a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def min_insertions_to_palindrome(text: str) -> int:
    """Fewest characters to insert so that ``text`` becomes a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def shortest_common_supersequence_length(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Length of the shortest sequence holding both ``a`` and ``b`` as subsequences."""
    return len(a) + len(b) - lcs_length(a, b)


def shortest_common_supersequence(a: str, b: str) -> str:
    """One shortest string holding both ``a`` and ``b`` as subsequences."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    built: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            built.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            built.append(b[j - 1])
            j -= 1
        else:
            built.append(a[i - 1])
            i -= 1
    built.extend(reversed(a[:i]))
    built.extend(reversed(b[:j]))
    return "".join(reversed(built))