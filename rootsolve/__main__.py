import sys

from rootsolve.cli import main

sys.exit(main())
