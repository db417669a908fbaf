# main.py
import sys

from deprecation_watch.cli import main

if __name__ == "__main__":
    sys.exit(main())
