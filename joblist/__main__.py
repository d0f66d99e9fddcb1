import sys

from joblist.cli import main

sys.exit(main())
