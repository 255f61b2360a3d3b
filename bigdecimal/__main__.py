"""Allow running the calculator as `python -m bigdecimal`."""

import sys

from bigdecimal.cli import main

if __name__ == "__main__":
    sys.exit(main())
