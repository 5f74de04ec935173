import sys

from roomslots.cli import main

sys.exit(main())
