"""Base Operation Interface"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from ..parsing import wrap_signed

# 두 정수를 받아 정수 하나를 돌려주는 계산
Computation = Callable[[int, int], int]


class ComputationError(Exception):
    """계산 실패 (결과가 정의되지 않음)"""

    def __init__(self, operation: str, x: int, y: int, reason: str):
        self.operation = operation
        self.x = x
        self.y = y
        self.reason = reason
        super().__init__(f"{operation}({x}, {y}): {reason}")


class BaseOperation(ABC):
    """연산 기본 클래스

    결과는 `bits` 폭의 부호 있는 정수로 절삭되어 C int 연산처럼 동작한다.
    """

    def __init__(self, bits: int = 32):
        self.bits = bits

    @property
    @abstractmethod
    def name(self) -> str:
        """연산 이름"""
        pass

    @abstractmethod
    def _compute(self, x: int, y: int) -> int:
        """연산 실행 (구현 필요)"""
        pass

    def __call__(self, x: int, y: int) -> int:
        return wrap_signed(self._compute(x, y), self.bits)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bits={self.bits})"
