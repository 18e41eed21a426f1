"""`python -m binop` 엔트리포인트"""

import sys

from .cli import console_main

sys.exit(console_main())
