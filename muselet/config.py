"""Configuration management for muselet."""
from pathlib import Path
from datetime import datetime
from typing import Dict, Optional
from pydantic import BaseModel, Field
from rich.console import Console
import tomli
import tomli_w
import os
import re

from .models import RuleSetting, Severity
from .rules import RULES
from .rules.sections import RuleConfigError

DEFAULT_CONFIG_FILENAME = ".muselet.toml"

DEFAULT_RULE_SETTINGS = {
    "context-by-type": RuleSetting(level=Severity.ERROR, when="always"),
    "context-recommended": RuleSetting(level=Severity.WARNING, when="always"),
}

console = Console(stderr=True)


class Config(BaseModel):
    """Configuration settings for muselet.

    Rule settings mirror a commitlint rule entry: a severity level, a
    condition ("always" or "never") and an optional per-type section map.
    Rules left out of the file keep their default setting.
    """

    rules: Dict[str, RuleSetting] = Field(
        default_factory=dict,
        description="Per-rule overrides keyed by rule name"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always write a timestamped lint log"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters and shell metacharacters from a string setting."""
        if not value:
            return value

        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)
        value = re.split(r'[;&|`$()]', value)[0]

        if len(value) > 1000:
            value = value[:1000]

        return value.strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (relative, no traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    def rule_setting(self, name: str) -> RuleSetting:
        """Return the effective setting for a rule, falling back to its default."""
        if name not in RULES:
            raise RuleConfigError(f"Unknown rule: {name}")
        return self.rules.get(name, DEFAULT_RULE_SETTINGS[name])

    def check_rule_names(self) -> None:
        unknown = sorted(set(self.rules) - set(RULES))
        if unknown:
            raise RuleConfigError(f"Unknown rule(s) in config: {', '.join(unknown)}")

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Path to the repository root

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            if isinstance(config_data.get('log_file'), str):
                config_data['log_file'] = cls._sanitize_string(config_data['log_file'])
                if not cls._is_safe_path(config_data['log_file']):
                    console.print(f"[yellow]Warning: Unsafe log file path '{config_data['log_file']}', using default[/yellow]")
                    config_data['log_file'] = None

            config = cls(**config_data)
            config.check_rule_names()
            return config
        except Exception as e:
            # A broken config file must not block committing
            console.print(f"[yellow]Warning: Error reading config file: {e}[/yellow]")
            return cls()

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the repository root
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        config_dict = self.model_dump(mode="json", exclude_none=True)

        if config_dict.get('log_file') and not self._is_safe_path(config_dict['log_file']):
            console.print(f"[yellow]Warning: Unsafe log file path '{config_dict['log_file']}', not saving[/yellow]")
            del config_dict['log_file']

        try:
            with config_path.open('wb') as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            console.print(f"[red]Error saving config file: {e}[/red]")

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"muselet_log-{timestamp}.log")
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            console.print(f"[yellow]Warning: Unsafe log file path '{self.log_file}', using default[/yellow]")
            return None
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        env_data = {}

        env_mapping = {
            'MUSELET_ALWAYS_LOG': 'always_log',
            'MUSELET_LOG_FILE': 'log_file',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if field_name == 'log_file':
                    value = self._sanitize_string(value)

                if field_name == 'always_log':
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
