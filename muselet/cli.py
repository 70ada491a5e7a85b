#!/usr/bin/env python3
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .config import DEFAULT_CONFIG_FILENAME, Config
from .linter import CommitLinter
from .models import Commit
from .observers import ConsoleLogObserver, FileLogObserver
from .rules import DEFAULT_VALUE, RULES, normalize

console = Console()

repo_path_option = click.option(
    "-p",
    "--path",
    default=".",
    help="Path to the repository holding .muselet.toml (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)


@click.group()
def main():
    """
    Check that commit bodies carry the context sections their type calls for.

    Sections are markdown headers such as "### Why" in the commit body.
    Configuration can be set in .muselet.toml in the repository root.
    """


@main.command()
@repo_path_option
@click.option("-t", "--type", "commit_type", help="Conventional commit type (fix, feat, ...)")
@click.option(
    "-b",
    "--body-file",
    type=click.File("r"),
    default="-",
    help="File holding the commit body (defaults to stdin)",
)
@click.option("--merge", is_flag=True, help="Treat the commit as a merge commit (always exempt)")
@click.option("--revert", is_flag=True, help="Treat the commit as a revert commit (always exempt)")
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log lint results (overrides config setting)",
)
def check(
    path: Path,
    commit_type: Optional[str],
    body_file,
    merge: bool,
    revert: bool,
    log_file: Optional[Path],
):
    """Lint one already-parsed commit and exit non-zero on errors."""
    try:
        config = Config.load(path.absolute())

        body = body_file.read()

        commit = Commit(
            type=commit_type,
            body=body if body.strip() else None,
            merge=merge,
            revert={} if revert else None,
        )

        linter = CommitLinter(config)
        linter.add_observer(ConsoleLogObserver(console))

        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            linter.add_observer(FileLogObserver(str(log_file_path)))

        report = linter.lint(commit)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()

    if not report.valid:
        sys.exit(1)


@main.command()
@repo_path_option
def rules(path: Path):
    """Display the effective rule settings and sections per commit type."""
    try:
        repo_path = path.absolute()
        config = Config.load(repo_path)
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if config_path.exists():
            console.print(f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]")
        else:
            console.print("[dim]Using default values (no config file found)[/dim]")

        for name in RULES:
            setting = config.rule_setting(name)
            value = setting.value if setting.value is not None else DEFAULT_VALUE

            table = Table(title=f"{name} (level {int(setting.level)}, {setting.when})")
            table.add_column("Type")
            table.add_column("Required")
            table.add_column("Recommended")
            for commit_type, entry in value.items():
                sections = normalize(entry)
                table.add_row(
                    commit_type,
                    ", ".join(sections.required) or "-",
                    ", ".join(sections.recommended) or "-",
                )
            console.print(table)
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()


if __name__ == "__main__":
    main()
