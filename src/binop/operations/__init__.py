"""Operations Package"""

from .arithmetic import (
    AddOperation,
    DivideOperation,
    MaxOperation,
    MinOperation,
    ModuloOperation,
    MultiplyOperation,
    SubtractOperation,
)
from .base import BaseOperation, Computation, ComputationError

OPERATIONS: dict[str, type[BaseOperation]] = {
    "add": AddOperation,
    "sub": SubtractOperation,
    "mul": MultiplyOperation,
    "div": DivideOperation,
    "mod": ModuloOperation,
    "min": MinOperation,
    "max": MaxOperation,
}


def available_operations() -> list[str]:
    """등록된 연산 이름 목록"""
    return sorted(OPERATIONS)


def get_operation(name: str, bits: int = 32) -> BaseOperation:
    """이름으로 연산 인스턴스 생성"""
    try:
        operation_cls = OPERATIONS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown operation: {name} (available: {', '.join(available_operations())})"
        ) from None
    return operation_cls(bits=bits)


__all__ = [
    "AddOperation",
    "BaseOperation",
    "Computation",
    "ComputationError",
    "DivideOperation",
    "MaxOperation",
    "MinOperation",
    "ModuloOperation",
    "MultiplyOperation",
    "OPERATIONS",
    "SubtractOperation",
    "available_operations",
    "get_operation",
]
