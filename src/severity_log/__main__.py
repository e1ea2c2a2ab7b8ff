"""Allow ``python -m severity_log``."""

import sys

from .cli import main

sys.exit(main())
