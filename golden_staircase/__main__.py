import sys

from golden_staircase.cli import main

sys.exit(main())
