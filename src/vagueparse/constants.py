"""Shared constants: single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
StrEnum members are str-compatible, so downstream code (JSON payloads,
log lines, prompt text) works unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class PatternFamily(StrEnum):
    """Named groups of lexical rules for vague phrasing."""

    THING_REFERENCES = "thing_references"
    MAKE_ACTIONS = "make_actions"
    VAGUE_DESCRIPTIONS = "vague_descriptions"
    ERROR_FIXES = "error_fixes"
    UI_ACTIONS = "ui_actions"


class Intensity(StrEnum):
    """How urgent the request sounds."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ContextArea(StrEnum):
    """Coarse project area a request most likely applies to.

    Declaration order of the first four members is the tie-break
    order used by the context analyzer.
    """

    FRONTEND = "frontend"
    BACKEND = "backend"
    TESTING = "testing"
    CONFIG = "config"
    UNKNOWN = "unknown"


class CandidateSource(StrEnum):
    """Which producer created a candidate interpretation."""

    RULE_BASED = "rule_based"
    AI_ENHANCED = "ai_enhanced"


class ActionTag(StrEnum):
    """Closed set of concrete actions an interpretation can request."""

    DEBUG_AND_FIX = "debug_and_fix"
    CREATE_UI_COMPONENT = "create_ui_component"
    IMPLEMENT_FRONTEND_FEATURE = "implement_frontend_feature"
    IMPLEMENT_BACKEND_FEATURE = "implement_backend_feature"
    GENERAL_IMPLEMENTATION = "general_implementation"
    IMPROVE_CODE = "improve_code"
    WRITE_TESTS = "write_tests"
    UPDATE_CONFIG = "update_config"
    OPTIMIZE_PERFORMANCE = "optimize_performance"
    CLARIFY_REQUEST = "clarify_request"


class Category(StrEnum):
    """Interpretation category, compared against ContextArea for bonuses."""

    DEBUGGING = "debugging"
    UI = "ui"
    FRONTEND = "frontend"
    BACKEND = "backend"
    GENERAL = "general"
    IMPROVEMENT = "improvement"
    TESTING = "testing"
    CONFIG = "config"
    UNCLEAR = "unclear"


class AIStatus(StrEnum):
    """Outcome of the AI-assisted producer for one request."""

    OK = "ok"
    DISABLED = "disabled"
    TIMEOUT = "timeout"
    FAILED = "failed"
    DECODE_FAILED = "decode_failed"


# Default category for an AI candidate that omits one.
ACTION_CATEGORIES: dict[ActionTag, Category] = {
    ActionTag.DEBUG_AND_FIX: Category.DEBUGGING,
    ActionTag.CREATE_UI_COMPONENT: Category.UI,
    ActionTag.IMPLEMENT_FRONTEND_FEATURE: Category.FRONTEND,
    ActionTag.IMPLEMENT_BACKEND_FEATURE: Category.BACKEND,
    ActionTag.GENERAL_IMPLEMENTATION: Category.GENERAL,
    ActionTag.IMPROVE_CODE: Category.IMPROVEMENT,
    ActionTag.WRITE_TESTS: Category.TESTING,
    ActionTag.UPDATE_CONFIG: Category.CONFIG,
    ActionTag.OPTIMIZE_PERFORMANCE: Category.IMPROVEMENT,
    ActionTag.CLARIFY_REQUEST: Category.UNCLEAR,
}


# ── Confidence Thresholds ────────────────────────────────


class Confidence:
    """Named confidence values: single source of truth."""

    ERROR_FIX = 0.8  # error-fix rule base
    UI_ACTION = 0.7  # ui-action rule base
    AREA_IMPLEMENTATION = 0.6  # make-action with frontend/backend area
    GENERAL_IMPLEMENTATION = 0.5  # make-action, no usable area
    VAGUE_DESCRIPTION = 0.5  # improve/refactor rule base
    FALLBACK = 0.1  # nothing fired at all
    MEDIUM = 0.5  # below this the engine asks questions
    FLOOR = 0.1  # overall confidence minimum
    CEILING = 1.0  # overall confidence maximum


# ── Scoring Bonuses ──────────────────────────────────────

AI_SOURCE_BONUS = 0.1
AREA_MATCH_BONUS = 0.2
SPECIFICITY_BONUS = 0.1
SPECIFICITY_MIN_ACTIONS = 3  # strictly more than this earns the bonus

FOCUS_AREA_BONUS = 0.1
PATTERN_DENSITY_BONUS = 0.1
PATTERN_DENSITY_MIN_MATCHES = 2  # strictly more than this earns the bonus
SHORT_TEXT_PENALTY = 0.2
SHORT_TEXT_CHARS = 10

SCORE_PRECISION = 4

# ── Resolution Output ────────────────────────────────────

MAX_RELEVANT_FILES = 5
MAX_ALTERNATIVES = 2
MAX_MENU_CANDIDATES = 3
MAX_CLARIFYING_QUESTIONS = 5
MAX_AI_INTERPRETATIONS = 3

DEFAULT_SASS_LEVEL = 5
DEFAULT_VERBOSITY = "detailed"

FALLBACK_INTERPRETATION = "I couldn't understand that, try rephrasing"

# ── Circuit Breaker Configuration ────────────────────────

CB_LLM_FAILURE_THRESHOLD = 5
CB_LLM_RECOVERY_TIMEOUT = 30

# ── Retry Strategy ───────────────────────────────────────

RETRY_MAX_ATTEMPTS = 2
RETRY_INITIAL_WAIT = 1
RETRY_MAX_WAIT = 4

# ── Misc ─────────────────────────────────────────────────

ERROR_TRUNCATION_CHARS = 200
INPUT_HASH_LENGTH = 12
