"""binop - 두 정수 인자에 연산을 적용하는 CLI"""

from .config import DriverConfig
from .driver import RunResult, run

__all__ = [
    "DriverConfig",
    "RunResult",
    "run",
]

__version__ = "0.1.0"
