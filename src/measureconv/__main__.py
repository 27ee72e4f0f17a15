import sys

from measureconv.cli import main

sys.exit(main())
