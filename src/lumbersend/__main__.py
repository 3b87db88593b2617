import sys

from lumbersend.cli.main import main

sys.exit(main())
