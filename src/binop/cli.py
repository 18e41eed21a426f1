#!/usr/bin/env python3
"""binop CLI

두 정수 인자에 연산을 적용하고 결과를 출력하는 CLI 도구

사용법:
  binop 3 4
"""

import logging
import sys
from collections.abc import Sequence

from rich.console import Console

from .config import DriverConfig
from .driver import run
from .logging_utils import configure_logging
from .operations import Computation, ComputationError, get_operation

# stdout 은 결과 전용, 오류 메시지는 stderr
console = Console(stderr=True)
logger = logging.getLogger(__name__)


def main(
    argv: Sequence[str] | None = None,
    compute: Computation | None = None,
    config: DriverConfig | None = None,
) -> int:
    """CLI 메인 함수

    `argv` 는 sys.argv 와 같이 프로그램 이름을 포함한다.
    로깅 설정은 건드리지 않으므로 다른 프로그램에 포함해 호출할 수 있다.
    """
    args = list(sys.argv if argv is None else argv)
    config = config or DriverConfig()

    if compute is None:
        try:
            compute = get_operation(config.operation, bits=config.int_bits)
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            return 1
    logger.debug("Using computation %r", compute)

    try:
        result = run(args, compute, config)
    except ComputationError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    sys.stdout.write(result.output)
    sys.stdout.flush()
    return result.exit_status


def console_main() -> int:
    """`binop` 콘솔 스크립트 엔트리포인트"""
    config = DriverConfig()
    configure_logging(config.log_level)
    return main(config=config)


if __name__ == "__main__":
    sys.exit(console_main())
