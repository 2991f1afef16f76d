"""Allow ``python -m meadowfield``."""

import sys

from meadowfield.cli import main

sys.exit(main())
