"""Allow ``python -m parking_allocator``."""

import sys

from parking_allocator.cli import main

sys.exit(main())
