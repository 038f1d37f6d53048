import pytest

from predictor.prefix_index import PrefixIndex, symptom_key


def make_index(*words):
    idx = PrefixIndex()
    for w in words:
        idx.insert(w)
    return idx


def test_symptom_key_drops_case_and_non_letters():
    assert symptom_key("Loss of Taste!") == "lossoftaste"
    assert symptom_key("COVID-19") == "covid"
    assert symptom_key("") == ""
    assert symptom_key(None) == ""


def test_inserted_symptoms_are_found():
    words = ["fever", "sore throat", "Runny Nose", "loss of smell"]
    idx = make_index(*words)
    for w in words:
        assert idx.contains_exact(w)
        # every prefix of w yields w exactly once
        for i in range(1, len(w) + 1):
            hits = idx.suggestions(w[:i])
            if symptom_key(w[:i]):
                assert hits.count(w) == 1


def test_case_and_punctuation_insensitive():
    idx = make_index("Fever!")
    assert idx.contains_exact("fever")
    assert idx.contains_exact("FEVER")
    assert idx.suggestions("fe") == ["Fever!"]

    idx.insert("loss-of-taste")
    assert idx.contains_exact("loss of taste")


def test_prefix_is_not_exact_match():
    idx = make_index("fever")
    assert idx.has_prefix("fev")
    assert not idx.contains_exact("fev")
    assert not idx.has_prefix("fex")
    assert not idx.contains_exact("fevers")


def test_suggestions_alphabetical_child_order():
    idx = make_index("fever", "fatigue")
    assert idx.suggestions("f") == ["fatigue", "fever"]
    assert idx.suggestions("fe") == ["fever"]
    assert idx.suggestions("fa") == ["fatigue"]


def test_suggestions_parent_before_descendants():
    idx = make_index("b", "abc", "a", "ab")
    assert idx.suggestions("") == ["a", "ab", "abc", "b"]
    assert idx.suggestions("a") == ["a", "ab", "abc"]


def test_unknown_prefix_gives_empty_list():
    idx = make_index("fever")
    assert idx.suggestions("xyz") == []
    assert make_index().suggestions("a") == []


def test_reinsert_overwrites_display_string():
    idx = make_index("fever", "FEVER")
    assert idx.size() == 1
    assert idx.suggestions("f") == ["FEVER"]


def test_size_counts_terminals():
    idx = make_index("cough", "cold", "co", "cough")
    assert idx.size() == 3
    assert len(idx) == 3
    assert "cold" in idx
    assert 42 not in idx


def test_deep_keys_do_not_recurse():
    long_word = "a" * 5000
    idx = make_index(long_word, "b")
    assert idx.suggestions("aaa") == [long_word]
    assert idx.size() == 2


def test_frozen_index_rejects_insert():
    idx = make_index("fever")
    idx.freeze()
    assert idx.frozen
    with pytest.raises(RuntimeError):
        idx.insert("zebra stripes")
    assert idx.suggestions("") == ["fever"]
    assert idx.contains_exact("fever")
