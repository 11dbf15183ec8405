"""Cursor output generation: one .mdc per rule plus an optional .cursorignore."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from rulegen.config import Config
from rulegen.constants import CURSOR_IGNORE_FILENAME
from rulegen.ignore import generate_ignore_file, load_ignore_patterns
from rulegen.models import GeneratedOutput, IgnorePatterns, ToolTarget
from rulegen.rules.compilers import CursorRuleCompiler
from rulegen.rules.models import Rule

logger = logging.getLogger(__name__)

IgnoreLoader = Callable[[Optional[str]], IgnorePatterns]


def _qualify(base_dir: Optional[str], *parts: str) -> str:
    """Join like a plain path concatenation: ``base_dir`` is kept even when a
    later part is absolute."""
    if base_dir:
        return os.path.join(base_dir, *(part.lstrip("/" + os.sep) for part in parts))
    return os.path.join(*parts)


def generate_cursor_config(
    rules: list[Rule],
    config: Config,
    base_dir: Optional[str] = None,
    ignore_loader: IgnoreLoader = load_ignore_patterns,
) -> list[GeneratedOutput]:
    tool = ToolTarget.CURSOR.value
    compiler = CursorRuleCompiler()
    outputs: list[GeneratedOutput] = []

    for rule in rules:
        filepath = _qualify(
            base_dir, config.output_paths.cursor, compiler.filename_for(rule)
        )
        outputs.append(
            GeneratedOutput(tool=tool, filepath=filepath, content=compiler.compile(rule))
        )

    ignore_patterns = ignore_loader(base_dir)
    if ignore_patterns.patterns:
        outputs.append(
            GeneratedOutput(
                tool=tool,
                filepath=_qualify(base_dir, CURSOR_IGNORE_FILENAME),
                content=generate_ignore_file(ignore_patterns.patterns, tool),
            )
        )

    logger.debug("Generated %d %s outputs", len(outputs), tool)
    return outputs
