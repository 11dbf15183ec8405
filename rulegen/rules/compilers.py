"""Cursor .mdc rule compiler."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from rulegen.constants import FRONTMATTER_DELIMITER, MDC_EXTENSION
from rulegen.rules.classifier import determine_cursor_rule_type
from rulegen.rules.models import CursorRuleType, Rule


def _field(key: str, value: str = "") -> str:
    if not value:
        return f"{key}:"
    return f"{key}: {value}"


def _header_fields(rule: Rule, rule_type: CursorRuleType) -> list[str]:
    if rule_type == CursorRuleType.ALWAYS:
        return [_field("description"), _field("globs"), _field("alwaysApply", "true")]
    if rule_type == CursorRuleType.MANUAL:
        return [_field("description"), _field("globs"), _field("alwaysApply", "false")]
    if rule_type == CursorRuleType.SPECIFIC_FILES:
        return [
            _field("description"),
            _field("globs", ",".join(rule.frontmatter.globs)),
            _field("alwaysApply", "false"),
        ]
    return [
        _field("description", rule.frontmatter.description or ""),
        _field("globs"),
        _field("alwaysApply", "false"),
    ]


def render_cursor_rule(
    rule: Rule, rule_type: Optional[CursorRuleType] = None
) -> str:
    """Render ``rule`` as an ``.mdc`` document.

    The header is written by hand rather than through a YAML dumper: Cursor
    expects empty fields as a bare ``key:`` and comma joined globs.
    """
    if rule_type is None:
        rule_type = determine_cursor_rule_type(rule.frontmatter)

    lines: list[str] = [FRONTMATTER_DELIMITER]
    lines.extend(_header_fields(rule, rule_type))
    lines.append(FRONTMATTER_DELIMITER)
    lines.append("")
    lines.append(rule.content)
    return "\n".join(lines)


class IRuleCompiler(ABC):
    extension: str

    @abstractmethod
    def compile(self, rule: Rule) -> str:
        """Return compiled content for the target editor."""

    def filename_for(self, rule: Rule) -> str:
        return f"{rule.filename}{self.extension}"


class CursorRuleCompiler(IRuleCompiler):
    """Compile to Cursor .mdc format."""

    extension = MDC_EXTENSION

    def compile(self, rule: Rule) -> str:
        return render_cursor_rule(rule)
