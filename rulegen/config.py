"""Generator configuration loaded from ``rulegen.json``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft202012Validator

from rulegen.constants import (
    CONFIG_FILENAME,
    DEFAULT_CURSOR_OUTPUT_DIR,
    DEFAULT_RULES_DIRNAME,
)
from rulegen.errors import InvalidConfigSchemaError, InvalidJsonFormatError
from rulegen.utils import read_json

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "config.schema.json"


@dataclass(frozen=True)
class OutputPaths:
    cursor: str = DEFAULT_CURSOR_OUTPUT_DIR


@dataclass(frozen=True)
class Config:
    output_paths: OutputPaths = field(default_factory=OutputPaths)
    rules_dir: str = DEFAULT_RULES_DIRNAME


def load_schema() -> dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_config_payload(payload: Any, path: Path) -> None:
    validator = Draft202012Validator(load_schema())
    errors = sorted(validator.iter_errors(payload), key=lambda err: list(err.path))
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.path) or "<root>"
        raise InvalidConfigSchemaError(path, f"{location}: {first.message}")


def config_from_payload(payload: dict[str, Any]) -> Config:
    output_paths = payload.get("outputPaths", {})
    return Config(
        output_paths=OutputPaths(
            cursor=output_paths.get("cursor", DEFAULT_CURSOR_OUTPUT_DIR)
        ),
        rules_dir=payload.get("rulesDir", DEFAULT_RULES_DIRNAME),
    )


def default_config_path(base_dir: Optional[Path] = None) -> Path:
    return (base_dir or Path.cwd()) / CONFIG_FILENAME


def load_config(path: Path) -> Config:
    if not path.exists() or path.stat().st_size == 0:
        return Config()
    try:
        payload = read_json(path)
    except json.JSONDecodeError as exc:
        raise InvalidJsonFormatError(path, str(exc)) from exc
    validate_config_payload(payload, path)
    return config_from_payload(payload)
