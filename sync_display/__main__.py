"""Allow ``python -m sync_display``."""
import sys

from sync_display.cli import main

sys.exit(main())
