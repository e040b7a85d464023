"""Workflow orchestration for bulk contact imports."""

from .service import LIMIT_REACHED, ImportBudgetAllocator, import_text, summarize

__all__ = ["ImportBudgetAllocator", "LIMIT_REACHED", "import_text", "summarize"]
