"""Commit body context checks for conventional commits."""

__version__ = "0.1.0"

from .models import Commit, SectionConfig
from .rules import DEFAULT_VALUE, RULES, context_by_type, context_recommended

__all__ = [
    'Commit',
    'SectionConfig',
    'DEFAULT_VALUE',
    'RULES',
    'context_by_type',
    'context_recommended',
]
