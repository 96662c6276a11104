import sys

from pigsim.cli import main

sys.exit(main())
