"""Logging setup for the advisor service."""

import logging


class HealthCheckFilter(logging.Filter):
    """Filter out health check requests from uvicorn access logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to suppress health check log entries."""
        return '/health' not in record.getMessage()


def configure_logging(level: str = 'INFO') -> None:
    """Set the root log level and hide health checks from uvicorn access logs."""
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)
    logging.getLogger('uvicorn.access').addFilter(HealthCheckFilter())
