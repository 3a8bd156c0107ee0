# tests/test_spelling.py
import pytest

from trie_dictionary.core.trie import Trie


@pytest.fixture
def words():
    t = Trie()
    for w in ("color", "colour", "dolor", "cooler", "collar", "cat", "colorful"):
        t.insert(w)
    return t


def test_close_words_suggested(words):
    out = words.get_spelling_suggestions("color")
    assert "color" in out      # distance 0
    assert "colour" in out     # distance 1
    assert "collar" in out     # distance 2
    assert "cooler" in out     # distance 2


def test_only_same_first_letter(words):
    # dolor is a single edit from color, but starts with 'd'
    assert "dolor" not in words.get_spelling_suggestions("color")
    assert words.get_spelling_suggestions("dolour") == ["dolor"]


def test_far_words_excluded(words):
    out = words.get_spelling_suggestions("color")
    assert "cat" not in out
    assert "colorful" not in out   # 3 inserts


def test_traversal_order_kept(words):
    # cat (3 edits) and colorful (4) drop out; the rest stay in sorted walk order
    assert words.get_spelling_suggestions("colr") == ["collar", "color", "colour", "cooler"]


def test_absent_first_letter_branch(words):
    assert words.get_spelling_suggestions("xolor") == []


def test_empty_word():
    t = Trie()
    t.insert("a")
    assert t.get_spelling_suggestions("") == []


def test_empty_trie():
    assert Trie().get_spelling_suggestions("anything") == []


def test_custom_max_distance(words):
    assert words.get_spelling_suggestions("color", max_distance=0) == ["color"]
    assert "colorful" in words.get_spelling_suggestions("color", max_distance=3)


def test_bad_max_distance(words):
    with pytest.raises(ValueError):
        words.get_spelling_suggestions("color", max_distance=-1)
    with pytest.raises(TypeError):
        words.get_spelling_suggestions("color", max_distance=1.5)


def test_single_letter_word():
    t = Trie()
    for w in ("a", "an", "and", "ant", "b"):
        t.insert(w)
    assert t.get_spelling_suggestions("a") == ["a", "an", "and", "ant"]
