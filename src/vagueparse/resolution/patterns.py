"""Stage 2: lexical pattern families for vague programming requests.

Each family is an ordered list of compiled rules applied to normalized
text. Families are independent: one request may fire none or all.
No regex here is anchored; every literal match is collected.
"""

from __future__ import annotations

import re

from vagueparse.constants import Intensity, PatternFamily
from vagueparse.resolution.schemas import PatternMatchSet

PATTERN_RULES: dict[PatternFamily, tuple[re.Pattern[str], ...]] = {
    PatternFamily.THING_REFERENCES: (
        re.compile(
            r"\b(?:the|that|this)\s+(?:thing|stuff|object|component"
            r"|element|widget|thingy|doohickey)\b"
        ),
        re.compile(r"\b(?:it|that)\b"),
    ),
    PatternFamily.MAKE_ACTIONS: (
        re.compile(
            r"\bmake\s+(?:it|the\s+\w+)\s+"
            r"(?:work|do|happen|better|good|pretty)\b"
        ),
        re.compile(r"\b(?:create|build|add|generate)\s+(?:the|a|an)\s+\w+\b"),
        re.compile(r"\b(?:fix|repair|debug)\s+(?:the|it|that)\b"),
    ),
    PatternFamily.VAGUE_DESCRIPTIONS: (
        re.compile(r"\bdo\s+(?:the\s+)?stuff\b"),
        re.compile(r"\bhandle\s+(?:the\s+)?\w+\b"),
        re.compile(r"\bmake\s+it\s+(?:better|good|nice|pretty|work)\b"),
        re.compile(
            r"\b(?:improve|optimize|clean\s+up|refactor)\s+(?:it|this|that)\b"
        ),
    ),
    PatternFamily.ERROR_FIXES: (
        re.compile(
            r"\b(?:fix|solve|resolve|debug)\s+(?:the\s+)?"
            r"(?:error|bug|issue|problem)\b"
        ),
        re.compile(r"\bmake\s+it\s+(?:not\s+)?(?:crash|break|fail)\b"),
        re.compile(r"\bstop\s+(?:the\s+)?(?:error|crashing|breaking)\b"),
    ),
    PatternFamily.UI_ACTIONS: (
        re.compile(
            r"\badd\s+(?:the|a|an)\s+"
            r"(?:button|form|modal|popup|dropdown|menu)\b"
        ),
        re.compile(
            r"\bmake\s+it\s+(?:clickable|interactive|responsive|pretty)\b"
        ),
        re.compile(r"\b(?:style|design|beautify)\s+(?:it|this|that)\b"),
    ),
}

_URGENT = re.compile(r"\b(?:asap|urgent|now)\b")
_DEFERRED = re.compile(r"\b(?:whenever|maybe|later)\b")


def detect_intensity(text: str) -> Intensity:
    """Urgency words win over deferral words; neither means medium."""
    if _URGENT.search(text):
        return Intensity.HIGH
    if _DEFERRED.search(text):
        return Intensity.LOW
    return Intensity.MEDIUM


def extract_patterns(text: str) -> PatternMatchSet:
    """Collect every literal match per family from normalized text."""
    matches: dict[str, list[str]] = {}
    for family, rules in PATTERN_RULES.items():
        found: list[str] = []
        for rule in rules:
            found.extend(m.group(0) for m in rule.finditer(text))
        matches[family.value] = found

    return PatternMatchSet(
        **matches,
        intensity=detect_intensity(text),
    )
