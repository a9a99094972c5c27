import sys

from src.vectors.cli import main

sys.exit(main())
