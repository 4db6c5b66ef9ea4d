"""Cash movement engine: deposits and withdrawals."""

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from portfolio_ledger.core.exceptions import (
    ValidationError,
    PortfolioNotFoundError,
    InsufficientFundsError,
)
from portfolio_ledger.domain.models import CashMovement, CashMovementType
from portfolio_ledger.repositories.protocols import LedgerGateway, LedgerTransaction
from portfolio_ledger.services.snapshot_service import write_snapshot
from portfolio_ledger.services.validation import (
    require_id,
    require_positive,
    normalize_currency,
    normalize_note,
    normalize_timestamp,
)

logger = logging.getLogger(__name__)

RECORDABLE_TYPES = (CashMovementType.DEPOSIT, CashMovementType.WITHDRAWAL)


@dataclass
class CashMovementCreate:
    """Input data for recording a deposit or withdrawal."""

    portfolio_id: str
    movement_type: CashMovementType
    amount: Decimal
    currency: str
    happened_at: Optional[Union[datetime, str]] = None
    note: Optional[str] = None


class CashMovementService:
    """
    Records cash movements and applies their effects atomically.

    One transaction inserts the movement, updates the portfolio's
    cash/total aggregates and upserts the snapshot keyed by the movement's
    timestamp. A withdrawal that would leave negative cash is rejected
    before anything is written.
    """

    def __init__(self, gateway: LedgerGateway):
        self._gateway = gateway

    def record_movement(self, data: CashMovementCreate) -> CashMovement:
        """Record a DEPOSIT or WITHDRAWAL and return the created movement."""
        movement = self._build_movement(data)

        def work(tx: LedgerTransaction) -> CashMovement:
            portfolio = tx.portfolios.get_by_id(movement.portfolio_id, for_update=True)
            if portfolio is None:
                raise PortfolioNotFoundError(movement.portfolio_id)

            next_cash = portfolio.cash_value + movement.signed_amount
            if movement.movement_type == CashMovementType.WITHDRAWAL and next_cash < 0:
                logger.warning(
                    f"Rejected withdrawal of {movement.amount} from portfolio "
                    f"{portfolio.portfolio_id}: cash {portfolio.cash_value}"
                )
                raise InsufficientFundsError(str(movement.amount), str(portfolio.cash_value))

            created = tx.cash_movements.create(movement)
            updated = tx.portfolios.update(
                replace(
                    portfolio,
                    cash_value=next_cash,
                    total_value=next_cash + portfolio.invested_value,
                )
            )
            write_snapshot(tx, updated, movement.happened_at)
            return created

        created = self._gateway.run_transaction(work)
        logger.info(
            f"Recorded {created.movement_type.value} of {created.amount} {created.currency} "
            f"for portfolio {created.portfolio_id}"
        )
        return created

    def list_movements(self, portfolio_id: str) -> list[CashMovement]:
        """List movements of a portfolio, newest first."""

        def work(tx: LedgerTransaction) -> list[CashMovement]:
            if tx.portfolios.get_by_id(portfolio_id) is None:
                raise PortfolioNotFoundError(portfolio_id)
            return tx.cash_movements.list_by_portfolio(portfolio_id)

        return self._gateway.run_transaction(work)

    @staticmethod
    def _build_movement(data: CashMovementCreate) -> CashMovement:
        """Validate input and build the movement record."""
        try:
            movement_type = CashMovementType(data.movement_type)
        except ValueError:
            raise ValidationError(f"Unknown cash movement type: {data.movement_type}")
        if movement_type not in RECORDABLE_TYPES:
            raise ValidationError(
                f"{movement_type.value} movements cannot be recorded directly"
            )

        return CashMovement(
            movement_id=str(uuid.uuid4()),
            portfolio_id=require_id(data.portfolio_id, "portfolio_id"),
            movement_type=movement_type,
            amount=require_positive(data.amount, "amount"),
            currency=normalize_currency(data.currency),
            happened_at=normalize_timestamp(data.happened_at, "happened_at"),
            note=normalize_note(data.note),
        )
