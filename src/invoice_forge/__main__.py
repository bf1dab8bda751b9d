"""Allow ``python -m invoice_forge``."""

import sys

from invoice_forge.cli import main

sys.exit(main())
