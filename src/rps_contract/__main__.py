"""Allow running as: python -m rps_contract"""

import sys

from .cli import main

sys.exit(main())
