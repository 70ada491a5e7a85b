"""Section header matching and rule configuration normalization."""
import re
from typing import Iterable, List, Mapping, Optional

from pydantic import ValidationError

from ..models import SectionConfig


class RuleConfigError(ValueError):
    """Raised when a rule is handed configuration it cannot interpret."""


def _header_pattern(section: str) -> "re.Pattern[str]":
    # Matched per line: three hashes open the line, so prose like "see ### Why" is not a header.
    return re.compile(rf"\s*###\s+{re.escape(section)}", re.IGNORECASE)


def find_missing(body: Optional[str], expected: Iterable[str]) -> List[str]:
    """Return the names in ``expected`` that have no ``### <name>`` header in ``body``.

    Matching is case-insensitive and only looks at the start of the header
    name, so ``### Why (important)`` satisfies ``Why``. Order of ``expected``
    is preserved.
    """
    if body is None:
        return list(expected)
    lines = body.splitlines()
    missing = []
    for section in expected:
        pattern = _header_pattern(section)
        if not any(pattern.match(line) for line in lines):
            missing.append(section)
    return missing


def _string_list(field: str, entry) -> List[str]:
    if isinstance(entry, (str, bytes)) or not isinstance(entry, (list, tuple)):
        raise RuleConfigError(f"{field} must be a list of section names, got {entry!r}")
    for section in entry:
        if not isinstance(section, str):
            raise RuleConfigError(f"{field} contains a non-string section name: {section!r}")
    return list(entry)


def normalize(entry) -> SectionConfig:
    """Collapse a legacy section list or a structured entry into a SectionConfig.

    A bare list means "these sections are required" with nothing recommended.
    """
    if isinstance(entry, SectionConfig):
        return entry
    if isinstance(entry, Mapping):
        try:
            return SectionConfig.model_validate(dict(entry))
        except ValidationError as e:
            raise RuleConfigError(f"Invalid section config {dict(entry)!r}: {e}") from e
    return SectionConfig(required=tuple(_string_list("section list", entry)))
