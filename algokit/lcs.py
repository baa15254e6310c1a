"""Longest common subsequence and related string problems."""

from __future__ import annotations

__all__ = [
    "lcs_length",
    "lcs_string",
    "longest_common_substring",
    "longest_palindromic_subsequence",
    "shortest_common_supersequence",
]


def _lcs_table(a: str, b: str) -> list[list[int]]:
    """Return the (len(a)+1) x (len(b)+1) table of prefix LCS lengths."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, ca in enumerate(a, 1):
        row, prev = table[i], table[i - 1]
        for j, cb in enumerate(b, 1):
            if ca == cb:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(row[j - 1], prev[j])
    return table


def lcs_length(a: str, b: str) -> int:
    """Length of the longest common subsequence of ``a`` and ``b``."""
    return _lcs_table(a, b)[len(a)][len(b)]


def lcs_string(a: str, b: str) -> str:
    """One longest common subsequence of ``a`` and ``b``.

    On a tie while walking back, the step that drops a character of ``a``
    is preferred.
    """
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    picked: list[str] = []
    while i and j:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(picked))


def longest_common_substring(a: str, b: str) -> str:
    """The longest contiguous run shared by ``a`` and ``b``.

    When several runs share the maximal length, the one ending earliest in
    ``a`` (then in ``b``) is returned. Returns an empty string when the
    inputs share no character.
    """
    best_len = 0
    best_end = 0
    prev = [0] * (len(b) + 1)
    for i, ca in enumerate(a, 1):
        row = [0] * (len(b) + 1)
        for j, cb in enumerate(b, 1):
            if ca == cb:
                row[j] = prev[j - 1] + 1
                if row[j] > best_len:
                    best_len = row[j]
                    best_end = i
        prev = row
    return a[best_end - best_len:best_end]


def longest_palindromic_subsequence(text: str) -> str:
    """One longest palindromic subsequence of ``text``."""
    return lcs_string(text, text[::-1])


def shortest_common_supersequence(a: str, b: str) -> str:
    """One shortest string holding both ``a`` and ``b`` as subsequences."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    out: list[str] = []
    while i and j:
        if a[i - 1] == b[j - 1]:
            out.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            out.append(a[i - 1])
            i -= 1
        else:
            out.append(b[j - 1])
            j -= 1
    out.extend(reversed(a[:i]))
    out.extend(reversed(b[:j]))
    return "".join(reversed(out))