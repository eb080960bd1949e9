# devsetup/__main__.py
import sys

from devsetup.main_setup import main

if __name__ == "__main__":
    sys.exit(main())
