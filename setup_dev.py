#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Entry point for the development environment setup.

Run from the project root:

    python setup_dev.py [--skip-lint] [--view-config] ...
"""

import sys

from devsetup.main_setup import main

if __name__ == "__main__":
    sys.exit(main())
