import pytest

from prefixtree import SAMPLE_WORDS, Trie
from prefixtree.trie import letter_index


@pytest.fixture
def sample_trie():
    trie = Trie()
    trie.import_words(SAMPLE_WORDS)
    return trie


def test_new_trie_is_empty():
    trie = Trie()
    assert trie.is_empty()
    assert trie.size() == 0
    assert trie.get_all_words() == []
    assert trie.get_longest_word() == ""


def test_sample_scenario(sample_trie):
    assert sample_trie.size() == 10
    assert sample_trie.get_by_prefix("al") == ["algebra", "algoritmh", "alphabet"]
    assert sample_trie.contains("algebra")
    assert sample_trie.starts_with("b")
    assert not sample_trie.contains("ban")
    assert sample_trie.get_by_prefix("xyz") == []


def test_longest_word_in_sample(sample_trie):
    # "algoritmh" has nine letters; "carboard", "alphabet" and "document" have eight.
    assert sample_trie.get_longest_word() == "algoritmh"


def test_longest_word_tie_goes_to_alphabetically_first():
    trie = Trie()
    trie.import_words(["zebra", "apple", "mango", "kiwi"])
    assert trie.get_longest_word() == "apple"


def test_duplicate_inserts_count_once():
    trie = Trie()
    for _ in range(3):
        trie.insert("band")
    assert trie.contains("band")
    assert trie.size() == 1


def test_inserting_batch_twice_is_idempotent(sample_trie):
    again = Trie()
    again.import_words(SAMPLE_WORDS)
    again.import_words(SAMPLE_WORDS)
    assert again.size() == sample_trie.size()
    assert again.get_all_words() == sample_trie.get_all_words()
    assert again.get_longest_word() == sample_trie.get_longest_word()
    assert again.first_letter_statistics() == sample_trie.first_letter_statistics()


def test_prefix_of_a_word_is_not_a_word_until_inserted():
    trie = Trie()
    trie.insert("carboard")
    assert not trie.contains("car")
    trie.insert("car")
    assert trie.contains("car")
    assert trie.contains("carboard")
    assert trie.size() == 2


def test_starts_with_every_prefix(sample_trie):
    for word in SAMPLE_WORDS:
        for end in range(1, len(word) + 1):
            assert sample_trie.starts_with(word[:end])


@pytest.mark.parametrize("s", ["x", "alz", "bandana", "dogs", "carboards"])
def test_starts_with_rejects_non_prefixes(sample_trie, s):
    assert not sample_trie.starts_with(s)


def test_get_all_words_is_sorted_and_distinct(sample_trie):
    assert sample_trie.get_all_words() == sorted(set(SAMPLE_WORDS))
    assert list(sample_trie) == sample_trie.get_all_words()


def test_get_by_prefix_matches_filter(sample_trie):
    for prefix in ["a", "b", "ban", "car", "d", "do", "dog"]:
        expected = sorted(w for w in SAMPLE_WORDS if w.startswith(prefix))
        assert sample_trie.get_by_prefix(prefix) == expected


def test_get_by_prefix_includes_prefix_itself_first(sample_trie):
    assert sample_trie.get_by_prefix("car") == ["car", "carboard"]


@pytest.mark.parametrize("value", ["", None])
def test_empty_and_none_inputs(sample_trie, value):
    assert not sample_trie.contains(value)
    assert not sample_trie.starts_with(value)
    assert sample_trie.get_by_prefix(value) == []


@pytest.mark.parametrize("value", ["", None])
def test_inserting_empty_or_none_is_a_no_op(value):
    trie = Trie()
    trie.insert(value)
    assert trie.size() == 0
    assert trie.is_empty()


def test_non_letters_are_dropped_on_insert_but_fail_lookup():
    trie = Trie()
    trie.insert("a1b")
    assert trie.contains("ab")
    assert not trie.contains("a1b")
    assert not trie.starts_with("a1")
    assert trie.get_all_words() == ["ab"]


def test_word_of_only_non_letters_marks_the_root():
    trie = Trie()
    trie.insert("123")
    assert trie.size() == 1
    assert trie.is_empty()
    assert not trie.contains("123")
    assert trie.get_all_words() == [""]


def test_uppercase_is_folded():
    trie = Trie()
    trie.insert("Hello")
    assert trie.contains("hello")
    assert trie.contains("HELLO")
    assert trie.get_all_words() == ["hello"]
    # Enumeration keeps the caller's prefix text.
    assert trie.get_by_prefix("HE") == ["HEllo"]


def test_letter_index():
    assert letter_index("a") == 0
    assert letter_index("Z") == 25
    assert not 0 <= letter_index("1") < 26
    assert not 0 <= letter_index("é") < 26
    # "İ" lowercases to "i" plus a combining dot; only the "i" counts.
    assert letter_index("İ") == letter_index("i")


def test_count_subtree(sample_trie):
    assert sample_trie.count_subtree(sample_trie.root) == 10
    node = sample_trie._find_node("ban")
    assert sample_trie.count_subtree(node) == 2
    node = sample_trie._find_node("car")
    assert sample_trie.count_subtree(node) == 2


def test_first_letter_statistics(sample_trie):
    assert sample_trie.first_letter_statistics() == {"a": 3, "b": 2, "c": 2, "d": 3}


def test_child_count_tracks_children():
    trie = Trie()
    trie.import_words(["ab", "ac", "ab"])
    a = trie.root.children[0]
    assert trie.root.child_count == 1
    assert a.child_count == 2
    assert not trie.is_empty()


def test_container_protocol(sample_trie):
    assert "dog" in sample_trie
    assert "do" not in sample_trie
    assert 42 not in sample_trie
    assert len(sample_trie) == 10
    assert repr(sample_trie) == "Trie(10 words)"


def test_dotted_capital_i_is_stored_as_i():
    trie = Trie()
    trie.insert("İs")
    assert trie.contains("is")
    assert trie.get_all_words() == ["is"]


def test_longest_word_handles_very_long_words():
    trie = Trie()
    trie.import_words(["b" * 10, "a" * 1500])
    assert trie.get_longest_word() == "a" * 1500
    assert trie.count_subtree(trie.root) == 2
