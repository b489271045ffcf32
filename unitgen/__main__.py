"""Allow running as ``python -m unitgen``."""

import sys

from .main import main

sys.exit(main())
