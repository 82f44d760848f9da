import sys

from hashflake.cli import main

sys.exit(main())
