from fastapi import HTTPException, Request, status

from aurajournal.errors import (
    AlreadyClassifiedError,
    InvalidInputError,
    JournalError,
    NotFoundError,
    UninitializedStoreError,
    UpstreamClassificationError,
)
from aurajournal.services.journal import JournalService


def get_journal_service(request: Request) -> JournalService:
    return request.app.state.journal_service


def http_error(exc: JournalError) -> HTTPException:
    """Map core errors onto HTTP statuses."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))

    if isinstance(exc, AlreadyClassifiedError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))

    if isinstance(exc, InvalidInputError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))

    if isinstance(exc, UpstreamClassificationError):
        # entry is saved; tell the client which one to retry
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": str(exc), "entry_id": exc.entry_id},
        )

    if isinstance(exc, UninitializedStoreError):
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))

    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal error")
