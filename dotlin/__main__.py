"""Entry point for ``python -m dotlin``."""

import sys

from .cli import main

sys.exit(main())
