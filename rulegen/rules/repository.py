"""Repository for source rule files."""

from __future__ import annotations

from pathlib import Path

from rulegen.rules.models import Rule
from rulegen.rules.parser import parse_rule


class RulesRepository:
    def __init__(self, rules_dir: Path) -> None:
        self._rules_dir = rules_dir

    @property
    def rules_dir(self) -> Path:
        return self._rules_dir

    def list_rules(self) -> list[Rule]:
        if not self._rules_dir.is_dir():
            return []
        rules: list[Rule] = []
        for child in sorted(self._rules_dir.iterdir()):
            if child.suffix == ".md" and not child.name.startswith("."):
                rules.append(parse_rule(child))
        return rules
