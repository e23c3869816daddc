import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "speech-relay"


def setup_logging():
    """
    Configures structured JSON logging for the service.

    Every record carries timestamp, level, logger name, message, the Datadog
    trace_id/span_id and a static ``service`` field. The root logger and the
    Uvicorn loggers write through one stdout handler so request logs and
    pipeline logs share a format. The level comes from ``LOG_LEVEL``.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        static_fields={"service": SERVICE_NAME},
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for logger_name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level)
        server_logger.handlers = [handler]
        server_logger.propagate = False

    return root_logger
