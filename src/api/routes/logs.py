"""Runtime Log API Routes

Receives log payloads from the frontend and appends them to the runtime
log file shared with the server.
"""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status

from src.app.use_cases.runtime_logs import PersistLog, LogPersistedDTO
from src.depends import get_persist_log
from src.api.error import ClientError

router = APIRouter(prefix="/logs", tags=["Logs"])


@router.post("", response_model=LogPersistedDTO, status_code=status.HTTP_201_CREATED)
async def create_log_entry(
    payload: Dict[str, Any] = Body(...),
    persist_log: PersistLog = Depends(get_persist_log),
):
    """
    Persist a frontend log entry.

    The body is validated by the use case so that rejected payloads use
    the LOG_VALIDATION_ERROR shape instead of FastAPI's 422.

    **Example request:**
    ```json
    {
      "source": "app",
      "level": "error",
      "message": "Failed to load invoices",
      "page_url": "/accounting/invoices",
      "context": {"status": 500}
    }
    ```

    **Returns:**
    - 201: Line written
    - 400: Invalid payload
    - 500: Log file not writable
    """
    result = persist_log.log_frontend_payload(payload)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
