import re
from typing import List, Optional, Tuple

from controller.alignment.text_align import align_sequences, as_text, char_operations
from schemas.alignment import AlignmentResult, Operation, WordToken


_TOKEN_RE = re.compile(r"(\S+)|(\s+)")

# Must exceed any word-to-word substitution cost so that a word never
# replaces a space run.
TYPE_MISMATCH_COST = 1000

Group = Tuple[str, List[Operation]]


def tokenize(text: Optional[str]) -> List[WordToken]:
    text = as_text(text)
    return [
        WordToken(kind="word" if match.group(1) else "space", text=match.group())
        for match in _TOKEN_RE.finditer(text)
    ]


def word_cost(a: WordToken, b: WordToken) -> int:
    if a.kind != b.kind:
        return TYPE_MISMATCH_COST
    if a.kind == "space":
        return abs(len(a.text) - len(b.text))
    longest = max(len(a.text), len(b.text))
    mismatches = 0
    for i in range(longest):
        if i >= len(a.text) or i >= len(b.text) or a.text[i] != b.text[i]:
            mismatches += 1
    return mismatches


def _deleted(token: WordToken) -> Group:
    return token.kind, [Operation(type="delete", original=c) for c in token.text]


def _inserted(token: WordToken) -> Group:
    return token.kind, [Operation(type="insert", candidate=c) for c in token.text]


def _token_groups(original: List[WordToken], candidate: List[WordToken]) -> List[Group]:
    groups: List[Group] = []
    for step, i, j in align_sequences(original, candidate, word_cost):
        if step == "delete":
            groups.append(_deleted(original[i]))
            continue
        if step == "insert":
            groups.append(_inserted(candidate[j]))
            continue

        a, b = original[i], candidate[j]
        if a.kind == "word" and b.kind == "word":
            groups.append(("word", char_operations(a.text, b.text)))
        elif a.kind == "space" and b.kind == "space":
            # shorter run wins, duplicate whitespace collapses
            groups.append(
                ("space", [Operation(type="space", original=x, candidate=y) for x, y in zip(a.text, b.text)])
            )
        else:
            groups.append(_deleted(a))
            groups.append(_inserted(b))
    return groups


def _repair_spacing(groups: List[Group]) -> List[Operation]:
    operations: List[Operation] = []
    previous_kind = None
    for kind, group in groups:
        if kind == "word" and previous_kind == "word":
            operations.append(Operation(type="space", original=" ", candidate=" "))
        operations.extend(group)
        previous_kind = kind
    return operations


def align_words(original: Optional[str], candidate: Optional[str]) -> AlignmentResult:
    """Align two texts word by word, then character by character inside words.

    Tokens are whole words or whitespace runs. The token-level pass never
    splits a word; substituted word pairs are then re-aligned with the
    character aligner and spliced back in.
    """
    original_tokens = tokenize(original)
    candidate_tokens = tokenize(candidate)
    groups = _token_groups(original_tokens, candidate_tokens)
    return AlignmentResult.from_operations(_repair_spacing(groups))
