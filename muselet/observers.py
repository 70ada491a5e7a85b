"""Observer pattern for lint results."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console

from .models import Commit, LintProblem, LintReport, Severity


class LintObserver(ABC):
    """Abstract base class for lint observers."""

    @abstractmethod
    def on_problem(self, commit: Commit, problem: LintProblem) -> None:
        """Called for every rule that reported a problem."""
        pass

    @abstractmethod
    def on_lint_completed(self, commit: Commit, report: LintReport) -> None:
        """Called once all rules have run for a commit."""
        pass


class ConsoleLogObserver(LintObserver):
    """Observer that logs lint results to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_problem(self, commit: Commit, problem: LintProblem) -> None:
        if problem.level == Severity.ERROR:
            self.console.print(f"[red]✖ {problem.message} \\[{problem.rule}][/red]")
        else:
            self.console.print(f"[yellow]⚠ {problem.message} \\[{problem.rule}][/yellow]")

    def on_lint_completed(self, commit: Commit, report: LintReport) -> None:
        summary = f"{len(report.errors)} errors, {len(report.warnings)} warnings"
        if report.valid:
            self.console.print(f"[green]✔ {summary}[/green]")
        else:
            self.console.print(f"[red]✖ {summary}[/red]")


class FileLogObserver(LintObserver):
    """Observer that logs lint results to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_problem(self, commit: Commit, problem: LintProblem) -> None:
        self._log(f"{problem.level.name} {problem.rule} ({commit.type}): {problem.message}")

    def on_lint_completed(self, commit: Commit, report: LintReport) -> None:
        status = "Passed" if report.valid else "Failed"
        self._log(
            f"{status} lint of {commit.type or 'untyped'} commit "
            f"({len(report.errors)} errors, {len(report.warnings)} warnings)"
        )
