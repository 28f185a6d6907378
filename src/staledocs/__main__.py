"""Allow ``python -m staledocs``."""
import sys

from staledocs.cli import main

sys.exit(main())
