import sys

from convention_mapper.cli import main


if __name__ == "__main__":
    sys.exit(main())
