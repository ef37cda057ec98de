import logging
import re
from typing import Iterable, Union


_DIGEST = re.compile(r"\b[0-9a-f]{40,}\b")


def abbreviate(digest: str) -> str:
    """Shorten a hex digest to ``abcdef...1234`` for display."""
    if len(digest) <= 13:
        return digest
    return f"{digest[:6]}...{digest[-4:]}"


class DigestAbbreviatingFilter(logging.Filter):
    """Shorten long hex digests in log records so lines stay readable."""

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        short = _DIGEST.sub(lambda m: abbreviate(m.group(0)), msg)
        if short != msg:
            record.msg = short
            record.args = None
        return True


_FILTER = DigestAbbreviatingFilter()


def setup_logging(
    level: Union[int, str] = logging.INFO,
    loggers: Iterable[str] = ("merkle_engine", "merkle_sdk", "merkle_cli"),
) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level)
    for name in loggers:
        lg = logging.getLogger(name)
        lg.setLevel(level)
        if _FILTER not in lg.filters:
            lg.addFilter(_FILTER)
