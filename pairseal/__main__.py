import sys

from pairseal.cli import main

sys.exit(main())
