"""Parse rules with YAML frontmatter."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional

import yaml

from rulegen.errors import InvalidFrontmatterError, RuleFileError
from rulegen.rules.models import CursorRuleType, Rule, RuleFrontmatter

_FRONTMATTER_RE = re.compile(r"^---[ \t]*\n(?:(.*?)\n)?---[ \t]*(?:\n|$)", re.DOTALL)

RULE_TYPE_VALUES = [item.value for item in CursorRuleType]


def _scalar_text(value: Any, key: str, path: Path) -> str:
    if isinstance(value, (dict, list)):
        raise InvalidFrontmatterError(path, f"{key} must be a scalar")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_globs(raw: Any, path: Path) -> list[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return [part.strip() for part in raw.split(",") if part.strip()]
    if isinstance(raw, list):
        return [_scalar_text(item, "globs", path) for item in raw]
    return []


def _parse_rule_type(raw: Any, path: Path) -> Optional[CursorRuleType]:
    if raw is None or raw == "":
        return None
    try:
        return CursorRuleType(str(raw))
    except ValueError:
        allowed = ", ".join(RULE_TYPE_VALUES)
        raise InvalidFrontmatterError(
            path, f"cursorRuleType must be one of {allowed}, got {raw!r}"
        ) from None


def parse_rule_text(text: str, filename: str, path: Optional[Path] = None) -> Rule:
    source = path or Path(f"{filename}.md")

    match = _FRONTMATTER_RE.match(text)
    if match:
        try:
            raw = yaml.safe_load(match.group(1) or "") or {}
        except yaml.YAMLError as exc:
            raise InvalidFrontmatterError(source, str(exc)) from exc
        content = text[match.end() :].lstrip("\n")
    else:
        raw = {}
        content = text

    if not isinstance(raw, dict):
        raise InvalidFrontmatterError(source, "frontmatter must be a mapping")

    description = raw.get("description")
    frontmatter = RuleFrontmatter(
        description=(
            None if description is None else _scalar_text(description, "description", source)
        ),
        globs=_parse_globs(raw.get("globs"), source),
        cursor_rule_type=_parse_rule_type(raw.get("cursorRuleType"), source),
    )
    return Rule(
        filename=filename, frontmatter=frontmatter, content=content, source_path=path
    )


def parse_rule(path: Path) -> Rule:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuleFileError(path, f"Unable to read rule file ({exc})") from exc
    return parse_rule_text(text, path.stem, path)
