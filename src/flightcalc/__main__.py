"""Allow ``python -m flightcalc``."""

import sys

from flightcalc.cli import main

sys.exit(main())
