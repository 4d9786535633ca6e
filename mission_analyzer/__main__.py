"""Allow ``python -m mission_analyzer``."""

import sys

from mission_analyzer.cli.analyze_cli import main

sys.exit(main())
