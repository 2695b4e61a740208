from __future__ import annotations
import logging
from typing import List

from ..matching.ordering import CanonicalWord
from ..matching.boundary import compile_matchers, find_spans, apply_matches
from ..utils.casing import case_suffix

logger = logging.getLogger(__name__)

FIELD_PREFIX = "FIELD_"

def field_token(field: int, found: str) -> str:
    return f"{FIELD_PREFIX}{field}{case_suffix(found)}"

def encode_fields(text: str, table: List[CanonicalWord]) -> str:
    """
    Reversible masking: each match becomes FIELD_<n> plus the case suffix of
    the text found. All spellings of a word share its field number.
    """
    if not text or not table:
        return text
    protected = []
    n = 0
    for entry, pattern in compile_matchers(table):
        spans = find_spans(pattern, text, protected)
        if not spans:
            continue
        text, protected = apply_matches(text, protected, spans,
                                        lambda found, f=entry.field: field_token(f, found))
        n += len(spans)
    logger.debug("field masking replaced %d spans", n, extra={"mode": "field_numbers"})
    return text
