"""System routes for logs and diagnostics."""

import logging
from collections import deque
from datetime import datetime
from typing import Any, Dict, List

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()

# Global in-memory log buffer
LOG_BUFFER: deque = deque(maxlen=100)

STANDARD_RECORD_FIELDS = {
    'args', 'asctime', 'created', 'exc_info', 'exc_text', 'filename',
    'funcName', 'levelname', 'levelno', 'lineno', 'module',
    'msecs', 'message', 'msg', 'name', 'pathname', 'process',
    'processName', 'relativeCreated', 'stack_info', 'taskName', 'thread', 'threadName',
}


class LogEntry(BaseModel):
    timestamp: str
    level: str
    logger: str
    message: str
    extra: Dict[str, Any]


class MemoryLogHandler(logging.Handler):
    """Capture log records, including their ``extra`` fields, into memory."""

    def emit(self, record):
        try:
            msg = self.format(record)
            extra = {
                k: v if isinstance(v, (str, int, float, bool)) or v is None else str(v)
                for k, v in record.__dict__.items()
                if k not in STANDARD_RECORD_FIELDS
            }
            LOG_BUFFER.append({
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": msg,
                "extra": extra,
            })
        except Exception:
            self.handleError(record)


memory_handler = MemoryLogHandler()
memory_handler.setFormatter(logging.Formatter('%(message)s'))
memory_handler.setLevel(logging.INFO)

# Only the package's own loggers are buffered
package_logger = logging.getLogger("linkgraph")
package_logger.addHandler(memory_handler)
# Ensure level allows INFO
if package_logger.level == logging.NOTSET:
    package_logger.setLevel(logging.INFO)


@router.get("/api/system/logs", response_model=List[LogEntry])
async def get_logs():
    """Retrieve recent log records."""
    return list(LOG_BUFFER)


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
