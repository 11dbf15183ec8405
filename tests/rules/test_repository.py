"""Tests for RulesRepository."""

from pathlib import Path

from rulegen.rules.repository import RulesRepository


def test_list_missing_dir(tmp_path: Path) -> None:
    repo = RulesRepository(tmp_path / "rules")
    assert repo.list_rules() == []


def test_list_sorted_and_filtered(tmp_path: Path, write_rule) -> None:
    rules_dir = tmp_path / "rules"
    write_rule(rules_dir, "beta", "---\ndescription: Beta\n---\n\nBeta content.\n")
    write_rule(rules_dir, "alpha", "---\ndescription: Alpha\n---\n\nAlpha content.\n")
    (rules_dir / ".hidden.md").write_text("hidden", encoding="utf-8")
    (rules_dir / "notes.txt").write_text("not a rule", encoding="utf-8")

    rules = RulesRepository(rules_dir).list_rules()
    assert [rule.filename for rule in rules] == ["alpha", "beta"]
    assert rules[0].content == "Alpha content.\n"
