"""Entry point for ``python -m jsonmend``."""

import sys

from .cli import main

sys.exit(main())
