"""The ``summary`` command: expense totals per category and per month."""

from __future__ import annotations

from ..messages import format_usage
from ..model import ModelManager
from .base import Command, CommandResult, ExpenseSummary


class SummaryCommand(Command):
    COMMAND_WORD = "summary"
    MESSAGE_USAGE = format_usage(
        COMMAND_WORD,
        "Summarizes expenses per category and per month. Income is not counted.",
    )
    MESSAGE_NO_EXPENSES = "There are no expenses to summarize."

    def execute(self, model: ModelManager) -> CommandResult:
        unicash = model.unicash
        summary = ExpenseSummary(
            per_category=unicash.sum_of_expense_per_category(),
            per_year_month=unicash.sum_of_expense_per_year_month(),
        )
        if not summary.per_category:
            return CommandResult(self.MESSAGE_NO_EXPENSES, summary=summary)
        return CommandResult(render_summary(summary), summary=summary)


def render_summary(summary: ExpenseSummary) -> str:
    lines = ["Expenses by category:"]
    for name, total in sorted(summary.per_category.items(), key=lambda kv: (-kv[1], kv[0])):
        lines.append(f"  {name}: ${total:.2f}")
    lines.append("Expenses by month:")
    for ym, total in sorted(summary.per_year_month.items()):
        lines.append(f"  {ym}: ${total:.2f}")
    return "\n".join(lines)


__all__ = ["SummaryCommand", "render_summary"]
