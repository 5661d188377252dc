"""Allow ``python -m myshell``."""

import sys

from .cli import main

sys.exit(main())
