"""LLM prompts for the AI-assisted interpretation producer.

All LLM prompt text lives here. Builders are deterministic string
assembly so prompts can be asserted in tests.
"""

from __future__ import annotations

from collections.abc import Sequence

from vagueparse.constants import ActionTag, Category

# ── Interpretation system prompt ──────────────────────────────────

INTERPRETATION_SYSTEM_PROMPT = """\
You are a sassy but helpful assistant that specializes in interpreting \
vague programming requests.

## Job To Be Done
Translate lazy, unclear requests into specific, actionable programming \
tasks. Your output is parsed mechanically, so follow the format exactly.

## Context
- Primary area: {area}
- Suggested focus: {focus}
- Sass level: {sass_level}/10 (1=polite, 10=maximum sass)
- Verbosity: {verbosity}

## Rules
1. Generate 2-3 different interpretations of the vague request
2. Be specific about what needs to be implemented
3. Include confidence scores (0.0-1.0)
4. Suggest concrete actions
5. Add the appropriate level of sass based on the sass level
6. If confidence is low, ask clarifying questions
7. "action" MUST be one of: {actions}
8. "category" SHOULD be one of: {categories}

## Output Format
Return a JSON object with this structure:
{{
  "interpretations": [
    {{
      "description": "What you think they want",
      "action": "one_of_the_allowed_actions",
      "category": "frontend",
      "confidence": 0.0,
      "suggestedActions": ["action1", "action2"],
      "sassyComment": "Your sassy response to their vague request"
    }}
  ],
  "clarifyingQuestions": ["question1", "question2"]
}}"""

INTERPRETATION_CATEGORIES = tuple(c.value for c in Category)

INTERPRETATION_USER_PROMPT = """\
The user said: "{text}"

Context information:
- Working area: {area}
- Relevant files: {files}
- Suggested focus: {focus}

Please interpret this vague request and provide specific, actionable \
interpretations with appropriate sass."""


def build_interpretation_system_prompt(
    area: str,
    suggested_focus: str | None,
    sass_level: int,
    verbosity: str,
) -> str:
    """Fill the system prompt with context and personality settings."""
    return INTERPRETATION_SYSTEM_PROMPT.format(
        area=area,
        focus=suggested_focus or "unknown",
        sass_level=sass_level,
        verbosity=verbosity,
        actions=", ".join(a.value for a in ActionTag),
        categories=", ".join(INTERPRETATION_CATEGORIES),
    )


def build_interpretation_user_prompt(
    text: str,
    area: str,
    file_paths: Sequence[str],
    suggested_focus: str | None,
) -> str:
    """Quote the request and summarize the project context."""
    return INTERPRETATION_USER_PROMPT.format(
        text=text,
        area=area,
        files=", ".join(file_paths) or "none",
        focus=suggested_focus or "none",
    )
