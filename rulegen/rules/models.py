"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class CursorRuleType(str, Enum):
    ALWAYS = "always"
    MANUAL = "manual"
    SPECIFIC_FILES = "specificFiles"
    INTELLIGENTLY = "intelligently"


@dataclass(frozen=True)
class RuleFrontmatter:
    description: Optional[str] = None
    globs: list[str] = field(default_factory=list)
    cursor_rule_type: Optional[CursorRuleType] = None


@dataclass(frozen=True)
class Rule:
    filename: str
    frontmatter: RuleFrontmatter
    content: str
    source_path: Optional[Path] = None
