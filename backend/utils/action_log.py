"""
Query logging: writes which salary figures were requested, by whom, to the
application log (file + console).
"""
import logging
from typing import Any, Optional
from fastapi import Request

QUERY_LOGGER = logging.getLogger("staff.queries")


def get_client_ip(request: Request) -> Optional[str]:
    """Client IP; respects X-Forwarded-For when behind a proxy."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return None


def log_query(query: str, request: Optional[Request] = None, **details: Any) -> None:
    """
    Log a salary query to the application log.

    Example:
        log_query("SALARY", request, staff_id=3, date="2025-01-01", salary="1150.00")
        log_query("TOTAL_SALARY", request, date="2025-01-01", total="4521.38")
    """
    client = get_client_ip(request) if request is not None else None
    ctx = f"client={client}" if client else "client=unknown"
    extra_parts = [f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in details.items()]
    extra = " " + " ".join(extra_parts) if extra_parts else ""
    QUERY_LOGGER.info(f"QUERY | {ctx} | {query}{extra}")
