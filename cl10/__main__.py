"""Allow running cl10 as ``python -m cl10``."""

import sys

from cl10.cli.main import main

sys.exit(main())
