from __future__ import annotations
from typing import Iterable

from ..matching.ordering import build_canonical_table
from ..codecs.asterisk import encode_asterisks
from ..codecs.fields import encode_fields, FIELD_PREFIX
from ..codecs.decoder import build_variant_table, decode_fields

MODES = ("asterisks", "field_numbers")

def mask(text: str, words: Iterable[str]) -> str:
    """Replaces every occurrence of `words` (compound parts included) with '*' runs."""
    if not text or not words:
        return text
    return encode_asterisks(text, build_canonical_table(words))

def mask_with_fields(text: str, words: Iterable[str]) -> str:
    """Replaces every occurrence of `words` with FIELD_<n>[_A|_F] placeholders."""
    if not text or not words:
        return text
    return encode_fields(text, build_canonical_table(words))

def decode(text: str, words: Iterable[str]) -> str:
    """
    Inverse of mask_with_fields. `words` must be the same collection, in the
    same order, that produced the placeholders; otherwise field numbers point
    to other words and the output is silently wrong.
    """
    if not text or not words or FIELD_PREFIX not in text:
        return text
    return decode_fields(text, build_variant_table(build_canonical_table(words)))

def apply_mode(text: str, words: Iterable[str], mode: str) -> str:
    if mode == "asterisks":
        return mask(text, words)
    if mode == "field_numbers":
        return mask_with_fields(text, words)
    raise ValueError(f"unknown masking mode {mode!r}; expected one of {MODES}")
