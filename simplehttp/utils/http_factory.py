"""Factory functions for creating pre-configured HTTP clients."""

from typing import Any

from structlog.stdlib import BoundLogger

from simplehttp.config.settings import Settings, get_settings
from simplehttp.core.http import HTTPClient, HTTPXClient
from simplehttp.core.logging import get_logger, setup_logging
from simplehttp.core.pagination import SequentialLinkIterator, follow_links
from simplehttp.listener.timed import Clock, timed_http_client


logger = get_logger(__name__)


def configure_logging(settings: Settings | None = None) -> BoundLogger:
    """Install the log handler using ``settings.logging`` level and format."""
    if settings is None:
        settings = get_settings()
    return setup_logging(
        json_logs=settings.logging.json_logs,
        log_level=settings.logging.level,
    )


def create_client(
    settings: Settings | None = None,
    *,
    logger_name: str | None = None,
    clock: Clock | None = None,
) -> HTTPClient:
    """Create an HTTP client from settings.

    Args:
        settings: Settings to build from; the cached process settings if omitted
        logger_name: Wrap the client in a timing decorator logging to this
            logger; falls back to ``settings.logging.timing_logger``
        clock: Clock for the timing decorator (optional)

    Returns:
        An ``HTTPXClient``, wrapped in a ``TimedHTTPClient`` when a timing
        logger is configured
    """
    if settings is None:
        settings = get_settings()
    http = settings.http
    client: HTTPClient = HTTPXClient(
        timeout=http.timeout,
        verify=http.verify,
        follow_redirects=http.follow_redirects,
        user_agent=http.user_agent,
    )

    timing_logger = logger_name or settings.logging.timing_logger
    if timing_logger:
        client = timed_http_client(client, clock, timing_logger)

    logger.debug(
        "http_client_created",
        timeout=http.timeout,
        follow_redirects=http.follow_redirects,
        timed=bool(timing_logger),
    )
    return client


def paginate(
    client: HTTPClient,
    url: str,
    settings: Settings | None = None,
    **kwargs: Any,
) -> SequentialLinkIterator:
    """Fetch ``url`` and follow its next links using the pagination settings.

    Keyword arguments override ``settings.pagination``.
    """
    if settings is None:
        settings = get_settings()
    pagination = settings.pagination
    kwargs.setdefault("max_hops", pagination.max_hops)
    kwargs.setdefault("case_sensitive", pagination.case_sensitive_headers)
    return follow_links(client, url, **kwargs)
