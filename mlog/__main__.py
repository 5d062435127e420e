import sys

from mlog.cli import main

sys.exit(main())
