import sys

from runfile.cli import main

sys.exit(main())
