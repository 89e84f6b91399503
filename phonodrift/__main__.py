import sys

from phonodrift.cli import main

sys.exit(main())
