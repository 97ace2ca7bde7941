"""LCS alignment algorithm for token sequence matching."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

Step = Tuple[str, Optional[int], Optional[int]]


def lcs_table(ref: Sequence[str], hyp: Sequence[str]) -> List[List[int]]:
    """Suffix LCS lengths: table[i][j] = LCS(ref[i:], hyp[j:])."""
    n, m = len(ref), len(hyp)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(m - 1, -1, -1):
            if ref[i] == hyp[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return table


def align_sequences(ref: Sequence[str], hyp: Sequence[str]) -> List[Step]:
    """Insert/delete-only alignment maximizing the longest common subsequence.

    Returns list of tuples: (op, ref_index, hyp_index)
      op in {"match","delete","insert"}.

      match -> correct words
      delete -> missed words
      insert -> extra words

    Ties are broken walking left to right: equal tokens always match, and at
    a mismatch the reference token is dropped first whenever that keeps an
    LCS at least as long. Matches therefore stay as close as possible to
    their reference positions and the output is deterministic.

    Args:
        ref: Reference sequence (comparison keys)
        hyp: Hypothesis sequence (comparison keys from the attempt)

    Returns:
        List of tuples: (operation, ref_index, hyp_index)
    """
    n, m = len(ref), len(hyp)
    table = lcs_table(ref, hyp)

    ops: List[Step] = []
    i = j = 0
    while i < n and j < m:
        if ref[i] == hyp[j]:
            ops.append(("match", i, j))
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            ops.append(("delete", i, None))
            i += 1
        else:
            ops.append(("insert", None, j))
            j += 1
    ops.extend(("delete", k, None) for k in range(i, n))
    ops.extend(("insert", None, k) for k in range(j, m))
    return ops


def lcs_length(ref: Sequence[str], hyp: Sequence[str]) -> int:
    return lcs_table(ref, hyp)[0][0]
