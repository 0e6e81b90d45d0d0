"""Financial adapters for recording completed orders.

Implementations support multiple output channels:
- Stdout (terminal journal)
- Markdown file (append to a daily ledger)
"""

from .markdown import MarkdownLedgerAdapter
from .stdout import StdoutFinancialAdapter

__all__ = ["MarkdownLedgerAdapter", "StdoutFinancialAdapter"]
