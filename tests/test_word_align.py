import pytest

from controller.alignment.text_align import align_chars
from controller.alignment.word_align import TYPE_MISMATCH_COST, align_words, tokenize, word_cost
from schemas.alignment import WordToken


def test_tokenize_is_lossless():
    text = "  Hello,\tworld \n again"
    tokens = tokenize(text)
    assert "".join(token.text for token in tokens) == text
    assert [token.kind for token in tokens] == ["space", "word", "space", "word", "space", "word"]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize(None) == []


def test_word_cost():
    word = lambda text: WordToken(kind="word", text=text)
    space = lambda text: WordToken(kind="space", text=text)
    assert word_cost(word("иду"), word("идут")) == 1
    assert word_cost(word("abc"), word("abd")) == 1
    assert word_cost(word("ab"), word("ba")) == 2
    assert word_cost(space("   "), space(" ")) == 2
    assert word_cost(word("a"), space(" ")) == TYPE_MISMATCH_COST


@pytest.mark.parametrize("text", ["", "Go", "Я иду в магазин", "one  two\tthree"])
def test_identical_texts_are_all_matches(text):
    result = align_words(text, text)
    assert result.distance == 0
    assert all(op.is_match for op in result.operations)
    assert result.aligned_candidate == text
    assert align_chars(text, text).distance == 0


def test_extra_letter_is_confined_to_its_word():
    result = align_words("Я иду в магазин", "Я идут в магазин")
    assert result.distance == 1
    changed = [op for op in result.operations if not op.is_match]
    assert len(changed) == 1
    assert changed[0].type == "insert"
    assert changed[0].candidate == "т"
    assert result.aligned_candidate == "Я идут в магазин"
    assert result.aligned_original == "Я иду  в магазин"


def test_substituted_word_is_not_split():
    result = align_words("the quick fox", "the quik fox")
    assert [op.type for op in result.operations] == [
        "match", "match", "match",
        "space",
        "match", "match", "match", "delete", "match",
        "space",
        "match", "match", "match",
    ]
    assert result.distance == 1


def test_whitespace_runs_collapse_to_shorter():
    result = align_words("a  b", "a b")
    assert result.distance == 0
    assert [op.type for op in result.operations] == ["match", "space", "match"]
    assert result.aligned_candidate == "a b"


def test_unrelated_words_get_one_separator():
    result = align_words("cat", "dog")
    assert [op.type for op in result.operations] == [
        "insert", "insert", "insert",
        "space",
        "delete", "delete", "delete",
    ]
    assert result.distance == 6
    assert result.aligned_candidate == "dog    "
    assert result.aligned_original == "    cat"


@pytest.mark.parametrize(
    "original,candidate",
    [
        ("cat", "dog"),
        ("one two three", "four five"),
        ("Я иду в магазин", "мы идём домой"),
        ("memorize this line", "memorise that"),
    ],
)
def test_no_doubled_separators(original, candidate):
    types = [op.type for op in align_words(original, candidate).operations]
    for left, right in zip(types, types[1:]):
        assert not (left == "space" and right == "space")


def test_missing_words_are_deleted_per_character():
    result = align_words("Go home", "Go")
    assert [op.type for op in result.operations] == [
        "match", "match", "delete", "delete", "delete", "delete", "delete",
    ]
    assert result.distance == 5


def test_empty_candidate_deletes_everything():
    result = align_words("a b", "")
    assert result.distance == 3
    assert all(op.type == "delete" for op in result.operations)
