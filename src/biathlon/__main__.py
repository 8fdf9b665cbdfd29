import sys

from biathlon.cli import main

sys.exit(main())
