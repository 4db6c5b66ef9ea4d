"""View models for service outputs."""

from portfolio_ledger.domain.views.ledger import LedgerAction, LedgerActionKind

__all__ = [
    "LedgerAction",
    "LedgerActionKind",
]
