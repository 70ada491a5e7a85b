"""Rules requiring context sections in commit bodies, keyed by commit type."""
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from ..models import Commit, Polarity, RuleValue, SectionConfig
from .sections import RuleConfigError, find_missing, normalize

DEFAULT_VALUE: RuleValue = MappingProxyType({
    "fix": SectionConfig(required=("Why",), recommended=("Cause", "Approach")),
    "feat": SectionConfig(required=("Why",), recommended=("Approach", "Alternatives")),
    "refactor": SectionConfig(required=("Why", "Approach"), recommended=("Alternatives", "Invariants")),
    "perf": SectionConfig(required=("Why", "Metrics"), recommended=("Approach", "Tradeoffs")),
})

POLARITIES = ("always", "never")


def _as_commit(parsed: Union[Commit, Mapping]) -> Commit:
    if isinstance(parsed, Commit):
        return parsed
    return Commit.model_validate(dict(parsed))


def _applicable_sections(commit: Commit, when: str, value: RuleValue):
    """Return the normalized config for the commit, or None when the rule does not apply."""
    if commit.merge or commit.revert is not None:
        return None
    if not commit.type or commit.type not in value:
        return None
    if when not in POLARITIES:
        raise RuleConfigError(f"Unknown rule condition {when!r}, expected 'always' or 'never'")
    return normalize(value[commit.type])


def context_by_type(
    parsed: Union[Commit, Mapping],
    when: Polarity = "always",
    value: RuleValue = DEFAULT_VALUE,
) -> Tuple[bool, str]:
    """Check that the body carries every section required for the commit type.

    Merge and revert commits, and types absent from ``value``, always pass.
    With ``when="never"`` the rule inverts and fails if all required
    sections are present.
    """
    commit = _as_commit(parsed)
    sections = _applicable_sections(commit, when, value)
    if sections is None:
        return True, ""

    required = list(sections.required)
    missing = find_missing(commit.body, required)
    has_context = not missing
    result = not has_context if when == "never" else has_context

    message = ""
    if when == "never" and has_context:
        message = f"{commit.type} commits should NOT include: {', '.join(required)}"
    elif when == "always" and not has_context:
        message = f"{commit.type} commits should include: {', '.join(missing)}"
    return result, message


def context_recommended(
    parsed: Union[Commit, Mapping],
    when: Polarity = "always",
    value: RuleValue = DEFAULT_VALUE,
) -> Tuple[bool, str]:
    """Advisory counterpart of :func:`context_by_type` for recommended sections.

    Types without recommended sections are never flagged, whatever ``when`` is.
    """
    commit = _as_commit(parsed)
    sections = _applicable_sections(commit, when, value)
    if sections is None or not sections.recommended:
        return True, ""

    recommended = list(sections.recommended)
    missing = find_missing(commit.body, recommended)
    has_context = not missing
    result = not has_context if when == "never" else has_context

    message = ""
    if when == "never" and has_context:
        message = f"{commit.type} commits: consider NOT including: {', '.join(recommended)}"
    elif when == "always" and not has_context:
        message = f"{commit.type} commits: consider adding: {', '.join(missing)}"
    return result, message
