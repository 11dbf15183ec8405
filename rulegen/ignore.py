"""Ignore pattern loading and ignore-file rendering."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rulegen.constants import RULESYNC_IGNORE_FILENAME
from rulegen.models import IgnorePatterns

logger = logging.getLogger(__name__)

IGNORE_FILE_HEADER = (
    f"# Generated by rulegen from {RULESYNC_IGNORE_FILENAME}",
    "# This file is automatically generated. Do not edit manually.",
)


def parse_ignore_patterns(text: str) -> list[str]:
    patterns: list[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        patterns.append(stripped)
    return patterns


def load_ignore_patterns(base_dir: Optional[str] = None) -> IgnorePatterns:
    """Read ``.rulesyncignore`` from ``base_dir`` (or the working directory).

    A missing or unreadable file yields no patterns.
    """
    root = Path(base_dir) if base_dir else Path.cwd()
    path = root / RULESYNC_IGNORE_FILENAME
    if not path.is_file():
        logger.debug("No %s found at %s", RULESYNC_IGNORE_FILENAME, path)
        return IgnorePatterns(patterns=[])

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to read %s: %s", path, exc)
        return IgnorePatterns(patterns=[])

    patterns = parse_ignore_patterns(text)
    logger.debug("Loaded %d ignore patterns from %s", len(patterns), path)
    return IgnorePatterns(patterns=patterns)


def generate_ignore_file(patterns: list[str], tool: str) -> str:
    logger.debug("Rendering %d ignore patterns for %s", len(patterns), tool)
    lines: list[str] = list(IGNORE_FILE_HEADER)
    if patterns:
        lines.append("")
        lines.extend(patterns)
    return "\n".join(lines)
