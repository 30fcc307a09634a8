import sys

from wger_catalog.cli import main

sys.exit(main())
