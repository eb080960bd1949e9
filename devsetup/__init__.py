# devsetup/__init__.py
"""Development environment setup for the extension starter project."""

from devsetup.config import SCRIPT_VERSION

__version__ = SCRIPT_VERSION
