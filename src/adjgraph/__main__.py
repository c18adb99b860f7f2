import sys

from adjgraph.cli import main

sys.exit(main())
