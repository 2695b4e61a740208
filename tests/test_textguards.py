import pytest
from wordmask.utils.textguards import mask, mask_with_fields, decode, apply_mode
from wordmask.matching import boundary

def test_literal_scenarios(scenarios):
    for case in scenarios:
        assert mask(case["text"], case["words"]) == case["masked"]
        assert mask_with_fields(case["text"], case["words"]) == case["fields"]

def test_round_trip(scenarios):
    for case in scenarios:
        assert decode(mask_with_fields(case["text"], case["words"]), case["words"]) == case["text"]

@pytest.mark.parametrize("text,words", [
    ("mySecretKey", ["secret", "key"]),
    ("SECRET_KEY = secret-key", ["secret", "key"]),
    ("password123", ["password"]),
])
def test_round_trip_simple_compounds(text, words):
    assert decode(mask_with_fields(text, words), words) == text

def test_case_suffix_scenario():
    assert mask_with_fields("TEST", ["test"]) == "FIELD_1_A"
    assert mask_with_fields("Test", ["test"]) == "FIELD_1_F"
    assert mask_with_fields("test", ["test"]) == "FIELD_1"

def test_asterisk_length_matches_span():
    masked = mask("Alice met ALICE", ["alice"])
    assert masked == "***** met *****"
    assert len(masked) == len("Alice met ALICE")

def test_field_numbers_independent_of_text():
    words = ["alpha", "beta"]
    assert mask_with_fields("beta", words) == "FIELD_2"
    assert mask_with_fields("alpha beta BETA", words) == "FIELD_1 FIELD_2 FIELD_2_A"

def test_empty_inputs_return_unchanged():
    assert mask("", ["a"]) == ""
    assert mask("text", []) == "text"
    assert mask_with_fields("text", []) == "text"
    assert decode("FIELD_1", []) == "FIELD_1"
    assert decode("plain", ["a"]) == "plain"

def test_mismatched_words_decode_silently():
    assert decode("FIELD_2", ["only"]) == "FIELD_2"

def test_apply_mode():
    assert apply_mode("bob", ["bob"], "asterisks") == "***"
    assert apply_mode("bob", ["bob"], "field_numbers") == "FIELD_1"
    with pytest.raises(ValueError):
        apply_mode("bob", ["bob"], "rot13")

def test_unmatchable_word_does_not_stop_the_call(monkeypatch):
    real = boundary.build_word_pattern
    monkeypatch.setattr(boundary, "build_word_pattern", lambda w: "(" if w == "broken" else real(w))
    words = ["broken", "secret", "key"]
    assert mask("broken secret key", words) == "broken ****** ***"
    assert mask_with_fields("broken secret key", words) == "broken FIELD_2 FIELD_3"
