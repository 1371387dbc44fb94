"""Allow ``python -m fhevm_hub <example|category|docs> ...``."""

import sys

from fhevm_hub.cli import main

sys.exit(main())
