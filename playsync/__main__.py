"""Allow ``python -m playsync``."""

import sys

from playsync.cli import main

sys.exit(main())
