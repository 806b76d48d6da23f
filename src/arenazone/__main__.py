import sys

from arenazone.cli import main

sys.exit(main())
