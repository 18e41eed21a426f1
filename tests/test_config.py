"""설정 테스트"""

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from binop.config import DriverConfig


class TestDriverConfig:
    """설정 모델 테스트"""

    def test_default_config(self):
        config = DriverConfig()
        assert config.operation == "add"
        assert config.int_bits == 32
        assert config.line_terminator == "\r\n"
        assert config.log_level == "WARNING"

    def test_custom_config(self):
        config = DriverConfig(operation="div", int_bits=16, line_terminator="\n")
        assert config.operation == "div"
        assert config.int_bits == 16
        assert config.line_terminator == "\n"

    def test_int_bits_bounds(self):
        assert DriverConfig(int_bits=64).int_bits == 64
        with pytest.raises(ValidationError):
            DriverConfig(int_bits=128)
        with pytest.raises(ValidationError):
            DriverConfig(int_bits=4)
