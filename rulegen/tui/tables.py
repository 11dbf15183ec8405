from rich.table import Column, Table

from rulegen.models import WriteResult
from rulegen.rules.models import CursorRuleType, Rule
from rulegen.tui.enums import RULE_TYPE_STYLE, UIStyle, WRITE_STATUS_STYLE
from rulegen.utils import compact_home_path


class OutputsTable:
    @staticmethod
    def summary_block(result: WriteResult, mode: str):
        counts = result.summary()
        total = counts.pop("outputs")
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Outputs", str(total))
        table.add_row("Statuses", "  ".join(chips))
        return table

    @staticmethod
    def outputs_table(result: WriteResult) -> Table:
        table = Table(
            Column(header="Status", width=10),
            Column(header="Target", overflow="ellipsis"),
            Column(header="Reason", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for item in result.outcomes:
            style = WRITE_STATUS_STYLE.get(item.status, UIStyle.WHITE.value)
            table.add_row(
                f"[{style}]{item.status.value}[/{style}]",
                compact_home_path(item.path),
                item.detail,
            )
        return table


class RulesTable:
    @staticmethod
    def classification_table(rows: list[tuple[Rule, CursorRuleType]]) -> Table:
        table = Table(
            Column(header="Rule"),
            Column(header="Type", width=14),
            Column(header="Globs", overflow="ellipsis"),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for rule, rule_type in rows:
            style = RULE_TYPE_STYLE.get(rule_type, UIStyle.WHITE.value)
            table.add_row(
                rule.filename,
                f"[{style}]{rule_type.value}[/{style}]",
                ", ".join(rule.frontmatter.globs),
                rule.frontmatter.description or "",
            )
        return table
