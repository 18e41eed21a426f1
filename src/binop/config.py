"""드라이버 설정"""

from pydantic import BaseModel, Field


class DriverConfig(BaseModel):
    """드라이버 설정"""

    operation: str = "add"  # add, sub, mul, div, mod, min, max
    int_bits: int = Field(default=32, ge=8, le=64)
    line_terminator: str = "\r\n"
    log_level: str = "WARNING"
