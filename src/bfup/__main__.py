import sys

from _bfup.cli import main

if __name__ == "__main__":
    sys.exit(main())
