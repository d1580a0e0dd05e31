import sys

from blossom.cli import main

sys.exit(main())
