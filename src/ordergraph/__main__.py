"""Allow ``python -m ordergraph``."""

import sys

from ordergraph.cli import main

sys.exit(main())
