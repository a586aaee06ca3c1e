import pytest

from controller.alignment.text_align import align_chars, align_sequences, edit_distance


def _apply(original, operations):
    out = []
    cursor = 0
    for op in operations:
        if op.type in ("match", "replace"):
            out.append(op.candidate)
            cursor += 1
        elif op.type == "delete":
            cursor += 1
        elif op.type == "insert":
            out.append(op.candidate)
    assert cursor == len(original)
    return "".join(out)


@pytest.mark.parametrize("text", ["", "a", "kitten", "Я иду в магазин", "  spaced  out "])
def test_identical_strings_have_zero_distance(text):
    result = align_chars(text, text)
    assert result.distance == 0
    assert all(op.type == "match" for op in result.operations)
    assert result.aligned_original == text
    assert result.aligned_candidate == text


def test_both_empty_gives_empty_result():
    result = align_chars("", "")
    assert result.distance == 0
    assert result.operations == []


def test_empty_original_is_all_inserts():
    result = align_chars("", "abc")
    assert result.distance == 3
    assert [op.type for op in result.operations] == ["insert"] * 3
    assert result.aligned_original == "   "
    assert result.aligned_candidate == "abc"


def test_empty_candidate_is_all_deletes():
    result = align_chars("abc", "")
    assert result.distance == 3
    assert [op.type for op in result.operations] == ["delete"] * 3
    assert result.aligned_candidate == "   "


def test_kitten_sitting():
    result = align_chars("kitten", "sitting")
    assert result.distance == 3
    assert [op.type for op in result.operations] == [
        "replace",
        "match",
        "match",
        "match",
        "replace",
        "match",
        "insert",
    ]
    assert result.aligned_original == "kitten "
    assert result.aligned_candidate == "sitting"


def test_tie_prefers_replace_over_delete_and_insert():
    result = align_chars("ab", "ba")
    assert result.distance == 2
    assert [op.type for op in result.operations] == ["replace", "replace"]


def test_delete_preferred_when_cheaper():
    result = align_chars("Go", "G")
    assert [op.type for op in result.operations] == ["match", "delete"]
    assert result.operations[1].original == "o"
    assert result.operations[1].candidate is None


@pytest.mark.parametrize(
    "original,candidate",
    [
        ("kitten", "sitting"),
        ("Hello world", "Helo wrld!"),
        ("abc", "xyz"),
        ("магазин", "магазины"),
        ("a", ""),
        ("", "b"),
    ],
)
def test_operations_rebuild_candidate(original, candidate):
    result = align_chars(original, candidate)
    assert _apply(original, result.operations) == candidate
    assert max(len(original), len(candidate)) <= len(result.operations) <= len(original) + len(candidate)
    assert len(result.aligned_original) == len(result.operations)
    assert len(result.aligned_candidate) == len(result.operations)


def test_none_is_treated_as_empty():
    assert edit_distance(None, None) == 0
    assert edit_distance(None, "abc") == 3
    assert edit_distance("abc", None) == 3


def test_non_string_input_is_rejected():
    with pytest.raises(TypeError):
        align_chars(123, "abc")


def test_align_sequences_drains_boundary_greedily():
    steps = align_sequences("ab", "", lambda a, b: 0 if a == b else 1)
    assert steps == [("delete", 0, None), ("delete", 1, None)]
    steps = align_sequences("", "xy", lambda a, b: 0 if a == b else 1)
    assert steps == [("insert", None, 0), ("insert", None, 1)]
