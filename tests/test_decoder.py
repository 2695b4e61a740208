import pytest
from wordmask.matching.ordering import build_canonical_table
from wordmask.codecs.decoder import build_variant_table, decode_fields, parse_field_number, parse_field_token

def variants(words):
    return build_variant_table(build_canonical_table(words))

NINE = ["w1x", "w2x", "w3x", "w4x", "w5x", "w6x", "w7x", "w8x", "w9x"]

def test_variant_table():
    v = variants(["Secret"])[0]
    assert (v.lowercase, v.first_upper, v.uppercase) == ("secret", "Secret", "SECRET")

@pytest.mark.parametrize("text,expected", [
    ("FIELD_1", "test"),
    ("FIELD_1_F", "Test"),
    ("FIELD_1_A", "TEST"),
    ("(FIELD_1_A)", "(TEST)"),
])
def test_case_suffixes(text, expected):
    assert decode_fields(text, variants(["test"])) == expected

def test_longest_known_digit_prefix():
    assert decode_fields("FIELD_12", variants(NINE)) == "w1x2"
    assert parse_field_number("FIELD_12", 0, 12) == (8, 12)
    assert parse_field_number("FIELD_12", 0, 9) == (7, 1)

def test_digits_after_field_are_literal():
    assert decode_fields("FIELD_1123", variants(["password"])) == "password123"

def test_underscore_f_followed_by_field_is_a_separator():
    v = variants(["alpha", "beta"])
    assert decode_fields("FIELD_1_FIELD_2", v) == "alpha_beta"
    assert decode_fields("FIELD_1_F", v) == "Alpha"
    assert decode_fields("FIELD_1_FIELD_2_F", v) == "alpha_Beta"

def test_adjacent_and_separated_chains():
    v = variants(["alpha", "beta"])
    assert decode_fields("FIELD_1FIELD_2", v) == "alphabeta"
    assert decode_fields("FIELD_1-FIELD_2_A", v) == "alpha-BETA"
    assert decode_fields("FIELD_1_A_FIELD_2_A", v) == "ALPHA_BETA"
    assert decode_fields("myFIELD_1_FFIELD_2_F", v) == "myAlphaBeta"

@pytest.mark.parametrize("text", [
    "FIELD_3", "FIELD_0", "FIELD_01", "FIELD_", "FIELD_x", "field_1", "no placeholders here",
])
def test_malformed_tokens_pass_through(text):
    assert decode_fields(text, variants(["alpha", "beta"])) == text

def test_unknown_complete_token_with_suffix_stays_literal():
    assert decode_fields("FIELD_100_A", variants(NINE)) == "FIELD_100_A"

def test_parse_field_token_reports_end():
    assert parse_field_token("xFIELD_1_A!", 1, variants(["a"])) == (10, "A")
    assert parse_field_token("FIELD_9", 0, variants(["a"])) is None

def test_long_chain_is_linear():
    v = variants(["alpha", "beta"])
    text = "FIELD_1_" * 5000 + "FIELD_2"
    assert decode_fields(text, v) == "alpha_" * 5000 + "beta"
