from __future__ import annotations
import bisect
import logging
import re
from typing import Callable, List, Optional, Pattern, Tuple

from .ordering import CanonicalWord

logger = logging.getLogger(__name__)

Span = Tuple[int, int, str]          # (start, end, matched text as found)
Interval = Tuple[int, int]

# ---------------------------------------------------------------------------
# Fronteras. Las clases van fuera de (?i:...) para que [A-Z] siga siendo
# sólo mayúsculas; la palabra en sí se compara sin distinguir mayúsculas.
# ---------------------------------------------------------------------------
# token completo: ni letra ni dígito al lado ('_' cuenta como separador)
TOKEN_LEFT = r"(?<![^\W_])"
TOKEN_RIGHT = r"(?![^\W_])"
# prefijo de compuesto: secretKey, secret_key, secret-key, secret123
COMPOUND_RIGHT = r"(?=[A-Z0-9_\-])"
# sufijo de compuesto: KEYSecret, key_secret, key-secret, 123secret, keySecret
COMPOUND_LEFT = r"(?:(?<=[A-Z0-9_\-])|(?<=[a-z])(?=[A-Z]))"

def build_word_pattern(word: str) -> str:
    """
    Standalone token, compound prefix, compound suffix or infix (infix is
    covered by either compound branch). Delimiters are asserted, never consumed.
    """
    w = f"(?i:{re.escape(word)})"
    return f"(?:{TOKEN_LEFT}{w}{TOKEN_RIGHT}|{w}{COMPOUND_RIGHT}|{COMPOUND_LEFT}{w})"

def compile_matchers(table: List[CanonicalWord]) -> List[Tuple[CanonicalWord, Pattern[str]]]:
    """Compiles one pattern per canonical word, longest first; broken words are skipped."""
    out: List[Tuple[CanonicalWord, Pattern[str]]] = []
    for entry in table:
        try:
            out.append((entry, re.compile(build_word_pattern(entry.word))))
        except re.error as e:
            logger.warning("skipping unmatchable word: %s", e, extra={"word_index": entry.source_index,
                                                                      "field": entry.field})
    return out

def _overlaps(protected: List[Interval], start: int, end: int) -> bool:
    i = bisect.bisect_right(protected, (start, float("inf"))) - 1
    if i >= 0 and protected[i][1] > start:
        return True
    nxt = i + 1
    return nxt < len(protected) and protected[nxt][0] < end

def find_spans(pattern: Pattern[str], text: str, protected: Optional[List[Interval]] = None) -> List[Span]:
    """
    Left-to-right, non-overlapping matches that do not touch an already
    rewritten interval. `protected` must be sorted and disjoint.
    """
    protected = protected or []
    spans: List[Span] = []
    pos = 0
    while pos <= len(text):
        m = pattern.search(text, pos)
        if not m:
            break
        start, end = m.span()
        if end == start:
            pos = start + 1
            continue
        if _overlaps(protected, start, end):
            pos = start + 1
            continue
        spans.append((start, end, m.group(0)))
        pos = end
    return spans

def apply_matches(text: str, protected: List[Interval], spans: List[Span],
                  replace: Callable[[str], str]) -> Tuple[str, List[Interval]]:
    """
    Rewrites `spans` (sorted, disjoint, offsets in the original text) in one
    pass and returns the new text plus the protected intervals shifted to it.
    Same result as replacing rightmost-first, in linear time.
    """
    parts: List[str] = []
    shifted: List[Interval] = []
    prev = 0
    delta = 0
    i = 0
    for start, end, found in spans:
        # intervalos protegidos a la izquierda del tramo: sólo les afecta el delta acumulado
        while i < len(protected) and protected[i][0] < start:
            s, e = protected[i]
            shifted.append((s + delta, e + delta))
            i += 1
        repl = replace(found)
        parts.append(text[prev:start])
        parts.append(repl)
        shifted.append((start + delta, start + delta + len(repl)))
        delta += len(repl) - (end - start)
        prev = end
    for s, e in protected[i:]:
        shifted.append((s + delta, e + delta))
    parts.append(text[prev:])
    return "".join(parts), shifted
