import sys

from emoji_catalog.cli import main

sys.exit(main())
