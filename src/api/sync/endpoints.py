"""Manual sync trigger endpoint."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.sync.models import SyncErrorResponse, SyncResponse
from src.sync.exceptions import SyncInProgressError
from src.sync.factory import get_sync_job
from src.sync.job import SyncJob

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sync", tags=["sync"])


@router.post(
    "",
    response_model=SyncResponse,
    summary="Run a sync now",
    description="Fetches the latest records from Supabase and publishes them to Notion.",
    responses={
        409: {"model": SyncErrorResponse, "description": "Sync already in progress"},
        500: {"model": SyncErrorResponse, "description": "Sync failed"},
    },
)
def trigger_sync(job: SyncJob = Depends(get_sync_job)) -> SyncResponse | JSONResponse:
    """Run the sync job and report the outcome.

    :param job: The process-wide sync job.
    :returns: Sync counts, or an error response.
    """
    logger.info("Starting manual sync")

    try:
        result = job.run()
    except SyncInProgressError as e:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=SyncErrorResponse(error=str(e)).model_dump(),
        )
    except Exception as e:
        logger.exception(f"Manual sync failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=SyncErrorResponse(error=str(e)).model_dump(),
        )

    return SyncResponse(
        message="Sync completed successfully",
        records_processed=result.records_processed,
        records_published=result.records_published,
        records_failed=result.records_failed,
    )
