import sys

from .interfaces.cli_runner import main

sys.exit(main())
