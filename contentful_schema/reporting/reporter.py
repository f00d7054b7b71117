import logging
from typing import Any, Dict, Optional, Union

from .errors import ContentfulSchemaError, ERROR_MAP, format_error

logger = logging.getLogger("contentful_schema")


class Reporter:
    """
    Thin reporting facade over a logger.

    panic() is the only fatal path: it logs the structured error and raises
    SystemExit so the run stops.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self.logger = log or logger

    def info(self, message: str) -> None:
        self.logger.info(message)

    def verbose(self, message: str) -> None:
        self.logger.debug(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def panic(self, error: Union[ContentfulSchemaError, Dict[str, Any]]) -> None:
        if isinstance(error, ContentfulSchemaError):
            report = error.to_report()
        else:
            report = error

        code = report.get("id")
        message = format_error(code, report.get("context"))
        category = ERROR_MAP.get(code, {}).get("category", "UNKNOWN")

        self.logger.error(f"[{code}] ({category}) {message}")
        raise SystemExit(1)
