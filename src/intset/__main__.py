import sys

from intset._cli import main

sys.exit(main())
