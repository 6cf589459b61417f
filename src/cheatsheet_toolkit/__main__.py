import sys

from cheatsheet_toolkit.cli import main

sys.exit(main())
