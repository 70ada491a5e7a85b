import pytest

from muselet.config import DEFAULT_CONFIG_FILENAME
from muselet.models import Commit


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host MUSELET_* variables out of the tests."""
    monkeypatch.delenv("MUSELET_ALWAYS_LOG", raising=False)
    monkeypatch.delenv("MUSELET_LOG_FILE", raising=False)


@pytest.fixture
def fix_commit():
    """A fix commit with the required section but none of the recommended ones."""
    return Commit(type="fix", body="### Why\nUsers saw duplicate messages.")


@pytest.fixture
def repo_with_config(tmp_path):
    """A repository root whose config adds docs and trims fix recommendations."""
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text(
        '[rules.context-by-type]\n'
        'level = 2\n'
        'when = "always"\n'
        '\n'
        '[rules.context-by-type.value]\n'
        'docs = ["Context"]\n'
        'fix = { required = ["Why"], recommended = ["Cause"] }\n'
        '\n'
        '[rules.context-recommended]\n'
        'level = 1\n'
        '\n'
        '[rules.context-recommended.value]\n'
        'fix = { required = ["Why"], recommended = ["Cause"] }\n'
    )
    return tmp_path
