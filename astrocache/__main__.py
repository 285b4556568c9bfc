import sys

from astrocache.cli import main

sys.exit(main())
