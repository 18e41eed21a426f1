"""로깅 설정"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "binop"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """패키지 로거에 stderr 용 RichHandler 를 한 번만 등록

    루트 로거는 건드리지 않는다. 결과 출력은 stdout 전용이므로 로그는 항상 stderr 로 보낸다.
    """
    log_level = getattr(logging, (level or "WARNING").upper(), logging.WARNING)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    logger.propagate = False

    handler = next(
        (h for h in logger.handlers if isinstance(h, RichHandler)),
        None,
    )
    if handler is None:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
        logger.addHandler(handler)
    handler.setLevel(log_level)

    return logger
