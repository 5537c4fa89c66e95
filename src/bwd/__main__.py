import sys

from bwd.cli.bwd_cli import main

if __name__ == "__main__":
    sys.exit(main())
