"""Shared models for muselet."""
from enum import IntEnum
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

Polarity = Literal["always", "never"]


class Severity(IntEnum):
    OFF = 0
    WARNING = 1
    ERROR = 2


class Commit(BaseModel):
    """A commit as handed over by a conventional-commit parser."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    body: Optional[str] = None
    merge: bool = False
    revert: Optional[Any] = None

    @field_validator("merge", mode="before")
    @classmethod
    def _merge_none_is_false(cls, value):
        return False if value is None else value


class SectionConfig(BaseModel):
    """Sections expected in the body of one commit type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    required: Tuple[str, ...] = Field(
        default=(),
        description="Sections whose absence fails the check"
    )
    recommended: Tuple[str, ...] = Field(
        default=(),
        description="Sections whose absence is only reported"
    )


SectionSpec = Union[List[str], SectionConfig]
RuleValue = Mapping[str, Union[SectionSpec, Mapping[str, Any]]]


class RuleSetting(BaseModel):
    """How the host applies one rule: severity, polarity and sections."""

    level: Severity = Severity.ERROR
    when: Polarity = "always"
    value: Optional[Dict[str, SectionSpec]] = None


class LintProblem(BaseModel):
    rule: str
    level: Severity
    message: str


class LintReport(BaseModel):
    problems: List[LintProblem] = Field(default_factory=list)

    @property
    def errors(self) -> List[LintProblem]:
        return [p for p in self.problems if p.level == Severity.ERROR]

    @property
    def warnings(self) -> List[LintProblem]:
        return [p for p in self.problems if p.level == Severity.WARNING]

    @property
    def valid(self) -> bool:
        return not self.errors
