import sys

from lagrangefe.cli import main

sys.exit(main())
