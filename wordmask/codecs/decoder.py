from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..matching.ordering import CanonicalWord
from ..utils.casing import CaseCategory, render
from .fields import FIELD_PREFIX

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
SEPARATORS = "_-"

@dataclass(frozen=True)
class FieldVariants:
    lowercase: str
    first_upper: str
    uppercase: str

def build_variant_table(table: List[CanonicalWord]) -> List[FieldVariants]:
    """Index i holds the renderings of field i + 1."""
    return [
        FieldVariants(
            lowercase=render(e.word, CaseCategory.lower),
            first_upper=render(e.word, CaseCategory.first_upper),
            uppercase=render(e.word, CaseCategory.all_upper),
        )
        for e in table
    ]

def _digits_end(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in DIGITS:
        pos += 1
    return pos

def parse_field_number(text: str, start: int, max_fields: int) -> Optional[Tuple[int, int]]:
    """
    Reads FIELD_<digits> at `start` and returns (end, field) for the longest
    digit prefix whose value is a known field (1..max_fields). With 9 fields,
    FIELD_12 reads as field 1 followed by a literal '2'.
    """
    if not text.startswith(FIELD_PREFIX, start):
        return None
    cursor = start + len(FIELD_PREFIX)
    if cursor >= len(text) or text[cursor] not in DIGITS or text[cursor] == "0":
        return None
    value = 0
    matched = None
    while cursor < len(text) and text[cursor] in DIGITS:
        value = value * 10 + int(text[cursor])
        if value > max_fields:
            break
        matched = (cursor + 1, value)
        cursor += 1
    if matched is None:
        return None
    # FIELD_100_A con 9 campos es un token completo desconocido: se deja literal
    end = _digits_end(text, matched[0])
    if end > matched[0] and text.startswith(("_A", "_F"), end):
        return None
    return matched

def parse_field_token(text: str, start: int,
                      variants: List[FieldVariants]) -> Optional[Tuple[int, str]]:
    """
    Returns (end, replacement) for the token at `start`, or None when nothing
    decodable starts there. A trailing _F is only a case suffix when the text
    right after its '_' is not itself a field token (FIELD_1_FIELD_2).
    """
    parsed = parse_field_number(text, start, len(variants))
    if parsed is None:
        return None
    cursor, field = parsed
    v = variants[field - 1]
    if text.startswith("_A", cursor):
        return cursor + 2, v.uppercase
    if text.startswith("_F", cursor):
        # one-token peek, never recursive
        if parse_field_number(text, cursor + 1, len(variants)) is None:
            return cursor + 2, v.first_upper
    return cursor, v.lowercase

def decode_fields(text: str, variants: List[FieldVariants]) -> str:
    if not variants or FIELD_PREFIX not in text:
        return text
    out: List[str] = []
    cursor = 0
    n = 0
    while cursor < len(text):
        token = parse_field_token(text, cursor, variants) if text.startswith(FIELD_PREFIX, cursor) else None
        if token is None:
            out.append(text[cursor])
            cursor += 1
            continue
        cursor, replacement = token
        out.append(replacement)
        n += 1
        # cadena de marcadores pegados, con a lo sumo un '_' o '-' entre medias
        while cursor < len(text):
            token = parse_field_token(text, cursor, variants)
            if token is not None:
                cursor, replacement = token
                out.append(replacement)
                n += 1
                continue
            sep = text[cursor]
            if sep in SEPARATORS:
                token = parse_field_token(text, cursor + 1, variants)
                if token is not None:
                    out.append(sep)
                    cursor, replacement = token
                    out.append(replacement)
                    n += 1
                    continue
            break
    logger.debug("decoded %d placeholders", n)
    return "".join(out)
