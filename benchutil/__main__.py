# Path: benchutil/__main__.py
"""Allow ``python -m benchutil``."""

import sys

from .main import main

sys.exit(main())
