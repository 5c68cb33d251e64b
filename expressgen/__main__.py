"""Allow ``python -m expressgen``."""

import sys

from expressgen.cli import main

sys.exit(main())
