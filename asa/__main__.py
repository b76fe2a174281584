import sys

from asa.cli import main

sys.exit(main())
