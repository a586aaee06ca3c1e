from typing import Any, Callable, List, Optional, Sequence, Tuple

from schemas.alignment import AlignmentResult, Operation

Step = Tuple[str, Optional[int], Optional[int]]


def as_text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"Expected str or None, got {type(value).__name__}")
    return value


def _char_cost(a: str, b: str) -> int:
    return 0 if a == b else 1


def align_sequences(
    source: Sequence[Any],
    target: Sequence[Any],
    substitution_cost: Callable[[Any, Any], int],
) -> List[Step]:
    """Edit-distance alignment of two sequences.

    Returns the traceback path as (step, source_index, target_index) tuples
    where step is "replace" (diagonal), "delete" or "insert". Deletion and
    insertion cost 1; the diagonal costs ``substitution_cost(a, b)``.

    Ties are broken replace, then delete, then insert. The order decides
    which of several equal-cost alignments is rendered, so it must not
    change.
    """
    rows = len(source) + 1
    cols = len(target) + 1
    dp = [[0] * cols for _ in range(rows)]
    back: List[List[Optional[str]]] = [[None] * cols for _ in range(rows)]

    for i in range(1, rows):
        dp[i][0] = i
    for j in range(1, cols):
        dp[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            replace = dp[i - 1][j - 1] + substitution_cost(source[i - 1], target[j - 1])
            delete = dp[i - 1][j] + 1
            insert = dp[i][j - 1] + 1
            if replace <= delete and replace <= insert:
                dp[i][j] = replace
                back[i][j] = "replace"
            elif delete <= insert:
                dp[i][j] = delete
                back[i][j] = "delete"
            else:
                dp[i][j] = insert
                back[i][j] = "insert"

    i, j = len(source), len(target)
    steps: List[Step] = []
    while i > 0 or j > 0:
        step = back[i][j]
        if step is None:
            # boundary row/column: drain whatever is left
            if i > 0:
                steps.append(("delete", i - 1, None))
                i -= 1
            else:
                steps.append(("insert", None, j - 1))
                j -= 1
            continue
        if step == "replace":
            steps.append(("replace", i - 1, j - 1))
            i -= 1
            j -= 1
        elif step == "delete":
            steps.append(("delete", i - 1, None))
            i -= 1
        else:
            steps.append(("insert", None, j - 1))
            j -= 1

    steps.reverse()
    return steps


def char_operations(original: str, candidate: str) -> List[Operation]:
    if not original:
        return [Operation(type="insert", candidate=c) for c in candidate]
    if not candidate:
        return [Operation(type="delete", original=c) for c in original]

    operations: List[Operation] = []
    for step, i, j in align_sequences(original, candidate, _char_cost):
        if step == "replace":
            a, b = original[i], candidate[j]
            operations.append(
                Operation(type="match" if a == b else "replace", original=a, candidate=b)
            )
        elif step == "delete":
            operations.append(Operation(type="delete", original=original[i]))
        else:
            operations.append(Operation(type="insert", candidate=candidate[j]))
    return operations


def align_chars(original: Optional[str], candidate: Optional[str]) -> AlignmentResult:
    original = as_text(original)
    candidate = as_text(candidate)
    return AlignmentResult.from_operations(char_operations(original, candidate))


def edit_distance(a: Optional[str], b: Optional[str]) -> int:
    return align_chars(a, b).distance
