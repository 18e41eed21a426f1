"""인자 두 개를 받아 계산 결과를 출력하는 드라이버"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .config import DriverConfig
from .operations import Computation, ComputationError
from .parsing import parse_operands

logger = logging.getLogger(__name__)

# 프로그램 이름 + 피연산자 2개
CORRECT_ARGC_VALUE = 3
ARGUMENT_NUMBER_MESSAGE = "Only two arguments should be passed on the command line!"


class DriverState(str, Enum):
    AWAITING_VALIDATION = "awaiting_validation"
    ERRORING = "erroring"
    COMPUTING = "computing"


@dataclass
class RunResult:
    """실행 결과"""

    output: str
    exit_status: int = 0
    state: DriverState = DriverState.AWAITING_VALIDATION
    operands: tuple[int, ...] | None = None
    value: int | None = None


def format_line(text: str, config: DriverConfig) -> str:
    return f"{text}{config.line_terminator}"


def run(
    args: Sequence[str],
    compute: Computation,
    config: DriverConfig | None = None,
) -> RunResult:
    """인자 검증 → 파싱 → 계산 → 출력 문자열 생성

    `args` 는 0번에 프로그램 이름을 포함한 전체 인자 목록이다.
    `compute` 가 던지는 ComputationError 는 그대로 전파된다.
    """
    config = config or DriverConfig()
    state = DriverState.AWAITING_VALIDATION

    logger.debug("Argument count %d (expected %d)", len(args), CORRECT_ARGC_VALUE)
    if len(args) != CORRECT_ARGC_VALUE:
        state = DriverState.ERRORING
        return RunResult(
            output=format_line(ARGUMENT_NUMBER_MESSAGE, config),
            exit_status=0,
            state=state,
        )

    state = DriverState.COMPUTING
    x, y = parse_operands(list(args[1:]), bits=config.int_bits)
    logger.debug("Parsed operands: x=%d, y=%d", x, y)

    value = compute(x, y)
    if not isinstance(value, int):
        name = getattr(compute, "name", getattr(compute, "__name__", repr(compute)))
        raise ComputationError(
            name, x, y, f"expected an integer result, got {type(value).__name__}"
        )
    value = int(value)
    logger.debug("Result: %d", value)

    return RunResult(
        output=format_line(str(value), config),
        exit_status=0,
        state=state,
        operands=(x, y),
        value=value,
    )
