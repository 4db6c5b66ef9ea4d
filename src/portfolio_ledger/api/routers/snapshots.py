"""Snapshot endpoints."""

from fastapi import APIRouter, Depends

from portfolio_ledger.api.deps import get_snapshot_service
from portfolio_ledger.api.schemas import SnapshotCaptureRequest, SnapshotResponse
from portfolio_ledger.services import SnapshotService, SnapshotCapture

router = APIRouter(prefix="/portfolios/{portfolio_id}/snapshots", tags=["snapshots"])


@router.get("", response_model=list[SnapshotResponse])
def list_snapshots(
    portfolio_id: str,
    service: SnapshotService = Depends(get_snapshot_service),
):
    """List snapshots, newest first."""
    return [SnapshotResponse.model_validate(s) for s in service.list_snapshots(portfolio_id)]


@router.post("", response_model=SnapshotResponse, status_code=201)
def capture_snapshot(
    portfolio_id: str,
    data: SnapshotCaptureRequest,
    service: SnapshotService = Depends(get_snapshot_service),
):
    """Capture (or overwrite) the snapshot for a timestamp."""
    snapshot = service.capture_snapshot(
        SnapshotCapture(
            portfolio_id=portfolio_id,
            as_of=data.as_of,
            total_value=data.total_value,
            cash_value=data.cash_value,
            invested_value=data.invested_value,
        )
    )
    return SnapshotResponse.model_validate(snapshot)
