"""Damerau-Levenshtein edit distance.

Unrestricted variant: a transposed pair may still be edited around, so
``damerau_levenshtein("ca", "abc") == 2`` (the optimal string alignment
shortcut would give 3). Computed with the classic dynamic programming table
that keeps a sentinel "infinity" row and column plus, per alphabet symbol,
the last row in which the symbol was seen in ``a``.
"""

DEFAULT_ALPHABET_SIZE = 128


def damerau_levenshtein(a: str, b: str, alphabet_size: int = DEFAULT_ALPHABET_SIZE) -> int:
    """
    Return the edit distance between two strings.

    Insertions, deletions, substitutions and transpositions of adjacent
    characters cost 1 each.

    Args:
        a: First string
        b: Second string
        alphabet_size: Exclusive upper bound for the code points of both strings

    Returns:
        Minimum number of edits turning a into b

    Raises:
        ValueError: If a character lies outside the alphabet. Callers must
            convert domains to ASCII first.
    """
    if alphabet_size < 1:
        raise ValueError(f"alphabet_size must be positive, got {alphabet_size}")
    for text in (a, b):
        for char in text:
            if ord(char) >= alphabet_size:
                raise ValueError(
                    f"Character {char!r} in {text!r} is outside the alphabet "
                    f"of size {alphabet_size}"
                )

    infinity = len(a) + len(b)
    # h[i + 1][j + 1] is the distance between a[:i] and b[:j]
    h = [[0] * (len(b) + 2) for _ in range(len(a) + 2)]
    h[0][0] = infinity
    for i in range(len(a) + 1):
        h[i + 1][0] = infinity
        h[i + 1][1] = i
    for j in range(len(b) + 1):
        h[0][j + 1] = infinity
        h[1][j + 1] = j

    last_row = [0] * alphabet_size
    for i in range(1, len(a) + 1):
        last_match_col = 0
        for j in range(1, len(b) + 1):
            i1 = last_row[ord(b[j - 1])]
            j1 = last_match_col
            cost = 0 if a[i - 1] == b[j - 1] else 1
            if cost == 0:
                last_match_col = j
            h[i + 1][j + 1] = min(
                h[i][j] + cost,  # substitution
                h[i + 1][j] + 1,  # insertion
                h[i][j + 1] + 1,  # deletion
                h[i1][j1] + (i - i1 - 1) + 1 + (j - j1 - 1),  # transposition
            )
        last_row[ord(a[i - 1])] = i

    return h[len(a) + 1][len(b) + 1]
