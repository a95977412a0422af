import sys

from rref_matrix.cli import main

sys.exit(main())
