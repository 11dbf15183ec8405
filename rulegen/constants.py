from typing import Final


MDC_EXTENSION: Final[str] = ".mdc"
CURSOR_IGNORE_FILENAME: Final[str] = ".cursorignore"
RULESYNC_IGNORE_FILENAME: Final[str] = ".rulesyncignore"

ALL_FILES_GLOB: Final[str] = "**/*"
FRONTMATTER_DELIMITER: Final[str] = "---"

CONFIG_FILENAME: Final[str] = "rulegen.json"
DEFAULT_RULES_DIRNAME: Final[str] = ".rulesync"
DEFAULT_CURSOR_OUTPUT_DIR: Final[str] = ".cursor/rules"
