from __future__ import annotations
from enum import Enum

class CaseCategory(str, Enum):
    """Case of a matched span; the value is the placeholder suffix."""
    lower = ""
    first_upper = "_F"
    all_upper = "_A"

def classify(span: str) -> CaseCategory:
    """
    Classifies the text actually found in the subject (never the canonical word):
    - all alphabetic chars uppercase and more than one char -> all_upper
    - first char uppercase -> first_upper
    - anything else -> lower
    """
    if not span:
        return CaseCategory.lower
    all_upper = all(c.isupper() for c in span if c.isalpha())
    if all_upper and len(span) > 1:
        return CaseCategory.all_upper
    if span[0].isupper():
        return CaseCategory.first_upper
    return CaseCategory.lower

def case_suffix(span: str) -> str:
    return classify(span).value

def capitalize_first(s: str) -> str:
    # str.capitalize() lowercases the tail; only touch the first char
    return s[:1].upper() + s[1:]

def render(word: str, category: CaseCategory) -> str:
    lowered = word.lower()
    if category is CaseCategory.all_upper:
        return word.upper()
    if category is CaseCategory.first_upper:
        return capitalize_first(lowered)
    return lowered
