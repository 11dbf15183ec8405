"""Tests for Cursor output assembly."""

import os
from pathlib import Path
from typing import Optional

import pytest

from rulegen.config import Config, OutputPaths
from rulegen.generators.cursor import generate_cursor_config
from rulegen.ignore import generate_ignore_file
from rulegen.models import GeneratedOutput, IgnorePatterns
from rulegen.rules.compilers import render_cursor_rule
from rulegen.rules.models import Rule, RuleFrontmatter


def _rule(filename: str, description: str = "", globs: list[str] | None = None) -> Rule:
    return Rule(
        filename=filename,
        frontmatter=RuleFrontmatter(description=description, globs=globs or []),
        content=f"{filename} body",
    )


def _loader(patterns: list[str]):
    calls: list[Optional[str]] = []

    def _load(base_dir: Optional[str]) -> IgnorePatterns:
        calls.append(base_dir)
        return IgnorePatterns(patterns=list(patterns))

    _load.calls = calls  # type: ignore[attr-defined]
    return _load


def test_one_record_per_rule_in_order() -> None:
    rules = [_rule("r1", globs=["**/*"]), _rule("r2", description="Use for X")]
    config = Config(output_paths=OutputPaths(cursor=".cursor/rules"))

    outputs = generate_cursor_config(rules, config, ignore_loader=_loader([]))

    assert outputs == [
        GeneratedOutput(
            tool="cursor",
            filepath=os.path.join(".cursor/rules", "r1.mdc"),
            content=render_cursor_rule(rules[0]),
        ),
        GeneratedOutput(
            tool="cursor",
            filepath=os.path.join(".cursor/rules", "r2.mdc"),
            content=render_cursor_rule(rules[1]),
        ),
    ]


def test_base_dir_prefixes_rule_paths() -> None:
    config = Config(output_paths=OutputPaths(cursor="out/cursor"))
    outputs = generate_cursor_config(
        [_rule("r1")], config, base_dir="/repo", ignore_loader=_loader([])
    )
    assert outputs[0].filepath == os.path.join("/repo", "out/cursor", "r1.mdc")


def test_empty_ignore_patterns_emit_no_ignore_file() -> None:
    loader = _loader([])
    outputs = generate_cursor_config([_rule("r1")], Config(), ignore_loader=loader)
    assert len(outputs) == 1
    assert not any(item.filepath.endswith(".cursorignore") for item in outputs)
    assert loader.calls == [None]


def test_ignore_record_is_last() -> None:
    loader = _loader(["dist/", "*.pem"])
    outputs = generate_cursor_config(
        [_rule("r1"), _rule("r2")], Config(), base_dir="proj", ignore_loader=loader
    )
    assert [item.filepath for item in outputs] == [
        os.path.join("proj", ".cursor/rules", "r1.mdc"),
        os.path.join("proj", ".cursor/rules", "r2.mdc"),
        os.path.join("proj", ".cursorignore"),
    ]
    ignore = outputs[-1]
    assert ignore.tool == "cursor"
    assert ignore.content == generate_ignore_file(["dist/", "*.pem"], "cursor")
    assert loader.calls == ["proj"]


def test_ignore_file_without_base_dir() -> None:
    outputs = generate_cursor_config([], Config(), ignore_loader=_loader(["*.log"]))
    assert [item.filepath for item in outputs] == [".cursorignore"]


def test_loader_errors_propagate() -> None:
    def _broken(base_dir: Optional[str]) -> IgnorePatterns:
        raise RuntimeError("loader exploded")

    with pytest.raises(RuntimeError, match="loader exploded"):
        generate_cursor_config([_rule("r1")], Config(), ignore_loader=_broken)


def test_default_loader_reads_rulesyncignore(tmp_path: Path) -> None:
    (tmp_path / ".rulesyncignore").write_text("secrets/\n", encoding="utf-8")
    outputs = generate_cursor_config([], Config(), base_dir=str(tmp_path))
    assert len(outputs) == 1
    assert outputs[0].filepath == str(tmp_path / ".cursorignore")
    assert outputs[0].content.endswith("\nsecrets/")


def test_absolute_output_dir_stays_under_base_dir() -> None:
    config = Config(output_paths=OutputPaths(cursor="/out/rules"))
    outputs = generate_cursor_config(
        [_rule("r1")], config, base_dir="/repo", ignore_loader=_loader([])
    )
    assert outputs[0].filepath == os.path.join("/repo", "out/rules", "r1.mdc")


def test_absolute_output_dir_without_base_dir_is_kept() -> None:
    config = Config(output_paths=OutputPaths(cursor="/out/rules"))
    outputs = generate_cursor_config([_rule("r1")], config, ignore_loader=_loader([]))
    assert outputs[0].filepath == os.path.join("/out/rules", "r1.mdc")
