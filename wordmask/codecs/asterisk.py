from __future__ import annotations
import logging
from typing import List

from ..matching.ordering import CanonicalWord
from ..matching.boundary import compile_matchers, find_spans, apply_matches

logger = logging.getLogger(__name__)

def _stars(found: str) -> str:
    # longitud del texto encontrado, no de la palabra canónica
    return "*" * len(found)

def encode_asterisks(text: str, table: List[CanonicalWord]) -> str:
    """Irreversible masking: every match becomes a run of '*' of the same length."""
    if not text or not table:
        return text
    protected = []
    n = 0
    for _, pattern in compile_matchers(table):
        spans = find_spans(pattern, text, protected)
        if spans:
            text, protected = apply_matches(text, protected, spans, _stars)
            n += len(spans)
    logger.debug("asterisk masking replaced %d spans", n, extra={"mode": "asterisks"})
    return text
