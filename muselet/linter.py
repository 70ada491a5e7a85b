"""Commit linting against the configured context rules."""
from typing import List, Mapping, Optional, Union

from .config import Config
from .models import Commit, LintProblem, LintReport, Severity
from .observers import LintObserver
from .rules import DEFAULT_VALUE, RULES


class CommitLinter:
    """Runs every enabled rule over a parsed commit and maps verdicts to severities."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.config.check_rule_names()
        self.observers: List[LintObserver] = []

    def add_observer(self, observer: LintObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: LintObserver) -> None:
        self.observers.remove(observer)

    def lint(self, parsed: Union[Commit, Mapping]) -> LintReport:
        """Lint a commit and notify observers of each problem and of the final report."""
        commit = parsed if isinstance(parsed, Commit) else Commit.model_validate(dict(parsed))
        report = LintReport()

        for name, rule in RULES.items():
            setting = self.config.rule_setting(name)
            if setting.level == Severity.OFF:
                continue

            value = setting.value if setting.value is not None else DEFAULT_VALUE
            valid, message = rule(commit, setting.when, value)
            if valid:
                continue

            problem = LintProblem(rule=name, level=setting.level, message=message)
            report.problems.append(problem)
            for observer in self.observers:
                observer.on_problem(commit, problem)

        for observer in self.observers:
            observer.on_lint_completed(commit, report)
        return report
