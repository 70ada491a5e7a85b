"""Commit body context rules, registered under their commitlint names."""

from .context import DEFAULT_VALUE, context_by_type, context_recommended
from .sections import RuleConfigError, find_missing, normalize

RULES = {
    "context-by-type": context_by_type,
    "context-recommended": context_recommended,
}

__all__ = [
    'RULES',
    'DEFAULT_VALUE',
    'context_by_type',
    'context_recommended',
    'find_missing',
    'normalize',
    'RuleConfigError',
]
