import sys

from tccalc.cli import main

sys.exit(main())
