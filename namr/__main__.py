import sys

from namr.cli import main

sys.exit(main())
