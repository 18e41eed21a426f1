"""기본 산술 연산"""

from .base import BaseOperation, ComputationError


def _truncated_quotient(x: int, y: int) -> int:
    # C 나눗셈: 0 방향으로 버림
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


class AddOperation(BaseOperation):
    @property
    def name(self) -> str:
        return "add"

    def _compute(self, x: int, y: int) -> int:
        return x + y


class SubtractOperation(BaseOperation):
    @property
    def name(self) -> str:
        return "sub"

    def _compute(self, x: int, y: int) -> int:
        return x - y


class MultiplyOperation(BaseOperation):
    @property
    def name(self) -> str:
        return "mul"

    def _compute(self, x: int, y: int) -> int:
        return x * y


class DivideOperation(BaseOperation):
    """정수 나눗셈 (0 방향 버림)"""

    @property
    def name(self) -> str:
        return "div"

    def _compute(self, x: int, y: int) -> int:
        if y == 0:
            raise ComputationError(self.name, x, y, "division by zero")
        return _truncated_quotient(x, y)


class ModuloOperation(BaseOperation):
    """나머지 (부호는 피제수를 따름)"""

    @property
    def name(self) -> str:
        return "mod"

    def _compute(self, x: int, y: int) -> int:
        if y == 0:
            raise ComputationError(self.name, x, y, "modulo by zero")
        return x - y * _truncated_quotient(x, y)


class MinOperation(BaseOperation):
    @property
    def name(self) -> str:
        return "min"

    def _compute(self, x: int, y: int) -> int:
        return min(x, y)


class MaxOperation(BaseOperation):
    @property
    def name(self) -> str:
        return "max"

    def _compute(self, x: int, y: int) -> int:
        return max(x, y)
