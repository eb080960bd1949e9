# devsetup/setup_context.py
# -*- coding: utf-8 -*-
"""
Per-run record shared by the setup steps.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class SetupContext:
    """
    State carried from one setup step to the next.

    Attributes:
        project_root: Directory the package manager commands run in.
        package_manager: Set once by the package manager detection step and
            read by the install, type check and lint steps.
    """

    project_root: Path
    package_manager: Optional[str] = None

    def require_package_manager(self) -> str:
        if not self.package_manager:
            raise RuntimeError(
                "No package manager has been detected for this run"
            )
        return self.package_manager
