"""Structured logging setup with job ID support."""

import logging
import sys
import uuid
from contextvars import ContextVar

# Context variable for the conversion job being processed
job_id_var: ContextVar[str | None] = ContextVar("job_id", default=None)


def get_job_id() -> str:
    """
    Get current job ID or generate a new one.
    
    Returns:
        Job ID string (UUID)
    """
    job_id = job_id_var.get()
    if job_id is None:
        job_id = str(uuid.uuid4())
        job_id_var.set(job_id)
    return job_id


def set_job_id(job_id: str) -> None:
    """
    Set job ID for current context.
    
    Args:
        job_id: Job ID string
    """
    job_id_var.set(job_id)


class JobIDFilter(logging.Filter):
    """Logging filter that adds the job ID to log records."""
    
    def filter(self, record: logging.LogRecord) -> bool:
        """Add job_id to log record unless the caller passed one in extra."""
        if getattr(record, "job_id", None) is None:
            record.job_id = get_job_id()  # type: ignore[attr-defined]
        return True


def configure_logging(level: int | str = logging.INFO, verbose: bool = False) -> None:
    """
    Configure structured logging with job ID support.
    
    Args:
        level: Logging level (default: INFO)
        verbose: If True, log per-pass details from the accessibility services at DEBUG.
    """
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s job_id=%(job_id)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    handler.setFormatter(formatter)
    handler.addFilter(JobIDFilter())
    
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    
    # Per-pass counts are logged at DEBUG by the application services
    services_logger = logging.getLogger("src.application.services")
    if verbose:
        services_logger.setLevel(logging.DEBUG)
    else:
        services_logger.setLevel(logging.NOTSET)
