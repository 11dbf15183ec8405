"""Cursor rule type classification."""

from __future__ import annotations

from rulegen.constants import ALL_FILES_GLOB
from rulegen.rules.models import CursorRuleType, RuleFrontmatter


# U+FEFF counts as whitespace for blank descriptions.
def _is_blank(text: str) -> bool:
    return text.replace("\ufeff", "").strip() == ""


def determine_cursor_rule_type(frontmatter: RuleFrontmatter) -> CursorRuleType:
    """Map frontmatter to one of Cursor's four kinds of ``.mdc`` rules.

    An explicit ``cursor_rule_type`` always wins. Otherwise the checks run in
    order: always, manual, specificFiles, intelligently. A rule with both a
    description and non-wildcard globs matches none of the first three and
    lands in ``intelligently``.
    """
    if frontmatter.cursor_rule_type is not None:
        return frontmatter.cursor_rule_type

    description = frontmatter.description
    description_empty = description is None or _is_blank(description)
    globs_empty = len(frontmatter.globs) == 0
    globs_all_files = (
        len(frontmatter.globs) == 1 and frontmatter.globs[0] == ALL_FILES_GLOB
    )

    if globs_all_files:
        return CursorRuleType.ALWAYS
    if description_empty and globs_empty:
        return CursorRuleType.MANUAL
    if description_empty and not globs_empty:
        return CursorRuleType.SPECIFIC_FILES
    if not description_empty and globs_empty:
        return CursorRuleType.INTELLIGENTLY
    return CursorRuleType.INTELLIGENTLY
