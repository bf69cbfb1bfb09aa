import sys

from conceptsearch.cli import main

sys.exit(main())
