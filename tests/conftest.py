import sys
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture
def write_rule():
    def _write(rules_dir: Path, name: str, text: str) -> Path:
        rules_dir.mkdir(parents=True, exist_ok=True)
        path = rules_dir / f"{name}.md"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
