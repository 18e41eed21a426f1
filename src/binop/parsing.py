"""정수 인자 파싱

C `atoi` 와 같은 관대한 파싱: 앞쪽 숫자열만 읽고, 실패하면 0.
"""

import re

# C isspace() 기준 공백 문자
C_WHITESPACE = " \t\n\v\f\r"

LONG_MIN = -(1 << 63)
LONG_MAX = (1 << 63) - 1

_LEADING_NUMERAL = re.compile(r"([+-]?)([0-9]+)")


def wrap_signed(value: int, bits: int = 32) -> int:
    """2의 보수 부호 있는 정수 범위로 절삭"""
    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def parse_leading_int(text: str, bits: int = 32) -> int:
    """문자열 앞부분의 10진수를 정수로 변환 (오류 없음)"""
    match = _LEADING_NUMERAL.match(text.lstrip(C_WHITESPACE))
    if not match:
        return 0

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"

    # strtol 과 동일하게 long 범위에서 포화시킨 뒤 int 로 절삭
    if len(digits) > 19:
        value = LONG_MIN if sign == "-" else LONG_MAX
    else:
        value = int(digits)
        if sign == "-":
            value = -value
        value = max(LONG_MIN, min(LONG_MAX, value))

    return wrap_signed(value, bits)


def parse_operands(texts: list[str], bits: int = 32) -> tuple[int, ...]:
    """피연산자 문자열들을 순서대로 파싱"""
    return tuple(parse_leading_int(text, bits) for text in texts)
