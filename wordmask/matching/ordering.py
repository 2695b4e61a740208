from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Set

@dataclass(frozen=True)
class CanonicalWord:
    word: str          # first-seen spelling
    field: int         # 1-based, dense
    source_index: int  # position in the caller's collection

def build_canonical_table(words: Iterable[str]) -> List[CanonicalWord]:
    """
    Case-insensitive dedup (first spelling wins), then longest first; ties keep
    the caller's order. The caller's iteration order must be the same for the
    encode and the decode call, otherwise field numbers drift.
    """
    seen: Set[str] = set()
    kept = []
    for i, word in enumerate(words or []):
        if not isinstance(word, str) or not word:
            continue
        key = word.lower()
        if key in seen:
            continue
        seen.add(key)
        kept.append((word, i))
    kept.sort(key=lambda e: (-len(e[0]), e[1]))
    return [CanonicalWord(word=w, field=n, source_index=i) for n, (w, i) in enumerate(kept, start=1)]
