"""Portfolio ledger: cash movements, order settlement, positions and snapshots."""

__version__ = "0.1.0"
