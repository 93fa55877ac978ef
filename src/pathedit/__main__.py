"""Allow ``python -m pathedit``."""

import sys

from pathedit.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
