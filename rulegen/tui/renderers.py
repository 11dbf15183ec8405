from rich.console import Console
from rich.panel import Panel

from rulegen.models import WriteResult
from rulegen.rules.models import CursorRuleType, Rule
from rulegen.tui.enums import UIStyle
from rulegen.tui.tables import OutputsTable, RulesTable
from rulegen.utils import compact_home_path


def _panel(title: str, body, style: str = UIStyle.BLUE.value) -> Panel:
    return Panel(body, title=title, border_style=style, padding=(0, 1))


class RuleGenConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_outputs(self, result: WriteResult, mode: str) -> None:
        self.console.print(
            _panel(
                "generate overview",
                OutputsTable.summary_block(result, mode=mode),
                style=UIStyle.BLUE.value,
            )
        )
        if not result.outcomes:
            self.console.print(
                _panel("outputs", "No rules found.", style=UIStyle.DIM.value)
            )
            return
        self.console.print(
            _panel(
                "cursor outputs",
                OutputsTable.outputs_table(result),
                style=UIStyle.CYAN.value,
            )
        )
        if result.failed:
            failures = "\n".join(
                f"- {compact_home_path(item.path)}: {item.detail}" for item in result.failed
            )
            self.console.print(
                _panel("errors", failures, style=UIStyle.RED.value)
            )

    def render_classification(self, rows: list[tuple[Rule, CursorRuleType]]) -> None:
        if not rows:
            self.console.print(
                _panel("rules", "No rules found.", style=UIStyle.DIM.value)
            )
            return
        self.console.print(
            _panel(
                "cursor rule types",
                RulesTable.classification_table(rows),
                style=UIStyle.MAGENTA.value,
            )
        )
