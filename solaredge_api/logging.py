# solaredge_api/logging.py
"""Console logging for the solaredge-api CLI.

Log lines go to stderr so stdout carries only the JSON result. Third-party
loggers enabled through ``debug_modules`` (urllib3 logs every request line)
would print the API key; the handler masks any configured secret first.
"""

from __future__ import annotations

import logging
import sys
import urllib.parse
from typing import Iterable, TextIO

LOGGER_NAME = "solaredge"
MASK = "<hidden>"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class SecretFilter(logging.Filter):
    """Replace secrets, raw or URL-encoded, in the rendered message."""

    def __init__(self, secrets: Iterable[str]):
        super().__init__()
        variants = set()
        for secret in secrets:
            if secret:
                variants.add(secret)
                variants.add(urllib.parse.quote_plus(secret, safe=","))
        # longest first so an encoded form is not half-replaced
        self.secrets = sorted(variants, key=len, reverse=True)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.secrets:
            return True
        message = record.getMessage()
        masked = message
        for secret in self.secrets:
            masked = masked.replace(secret, MASK)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


class ConsoleLog:
    def __init__(
        self,
        level: str = "INFO",
        quiet: bool = False,
        debug_modules: Iterable[str] | None = None,
        secrets: Iterable[str] | None = None,
        stream: TextIO | None = None,
    ):
        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO
        self.quiet = quiet
        self.debug_modules = list(debug_modules or [])
        self.secrets = [s for s in (secrets or []) if s]
        self.stream = stream

    def setup(self) -> logging.Logger:
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(logging.DEBUG)

        if not self.quiet:
            handler = logging.StreamHandler(self.stream or sys.stderr)
            handler.setLevel(self.level)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            handler.addFilter(SecretFilter(self.secrets))
            root.addHandler(handler)

        for name in self.debug_modules:
            logging.getLogger(name).setLevel(logging.DEBUG)

        return logging.getLogger(LOGGER_NAME)
