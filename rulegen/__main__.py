import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from rulegen.config import Config, default_config_path, load_config
from rulegen.errors import RuleGenError
from rulegen.executor import OutputWriter
from rulegen.generators.cursor import generate_cursor_config
from rulegen.rules.classifier import determine_cursor_rule_type
from rulegen.rules.models import Rule
from rulegen.rules.repository import RulesRepository
from rulegen.tui.renderers import RuleGenConsoleUI


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _base_dir_from_obj(obj: Dict[str, Any]) -> Optional[str]:
    base_dir = obj.get("base_dir")
    return str(base_dir) if base_dir is not None else None


def _load_config_from_obj(obj: Dict[str, Any]) -> Config:
    config_path = obj.get("config_path")
    if config_path is None:
        base_dir = obj.get("base_dir")
        config_path = default_config_path(Path(base_dir) if base_dir else None)
    return load_config(config_path)


def _load_rules(obj: Dict[str, Any], config: Config) -> list[Rule]:
    base_dir = obj.get("base_dir")
    rules_dir = Path(config.rules_dir)
    if base_dir is not None and not rules_dir.is_absolute():
        rules_dir = Path(base_dir) / rules_dir
    return RulesRepository(rules_dir).list_rules()


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--base-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root that rules, config and outputs are resolved against.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to rulegen.json (defaults to <base-dir>/rulegen.json).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    base_dir: Optional[Path],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """Generate Cursor rule files from tool-agnostic rules."""
    _configure_logging(verbose)
    ctx.obj = {"base_dir": base_dir, "config_path": config_path}


@cli.command(help="Generate Cursor .mdc rules and .cursorignore.")
@click.option("--dry-run", is_flag=True, help="Show outputs without writing them.")
@click.pass_obj
def generate(obj: Dict[str, Any], dry_run: bool) -> None:
    ui = RuleGenConsoleUI(Console())
    try:
        config = _load_config_from_obj(obj)
        rules = _load_rules(obj, config)
        outputs = generate_cursor_config(
            rules, config, base_dir=_base_dir_from_obj(obj)
        )
    except RuleGenError as exc:
        raise click.ClickException(str(exc))

    writer = OutputWriter(Path.cwd())
    if dry_run:
        ui.render_outputs(writer.plan(outputs), mode="dry-run")
        return

    result = writer.write(outputs)
    ui.render_outputs(result, mode="generate")
    if result.failed:
        raise click.exceptions.Exit(1)


@cli.command(help="Show the Cursor rule type each rule resolves to.")
@click.pass_obj
def classify(obj: Dict[str, Any]) -> None:
    ui = RuleGenConsoleUI(Console())
    try:
        config = _load_config_from_obj(obj)
        rules = _load_rules(obj, config)
    except RuleGenError as exc:
        raise click.ClickException(str(exc))

    ui.render_classification(
        [(rule, determine_cursor_rule_type(rule.frontmatter)) for rule in rules]
    )


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
