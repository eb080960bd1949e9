# common/step_result.py
# -*- coding: utf-8 -*-
"""
Outcome values returned by setup steps and aggregated by the orchestrator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple


class StepStatus(str, Enum):
    """Outcome of a single setup step."""

    SUCCESS = "success"
    WARNING = "warning"
    SKIPPED = "skipped"
    FATAL = "fatal"


@dataclass
class StepResult:
    """
    Result of one setup step.

    Attributes:
        status: Outcome of the step.
        message: Main message shown to the user.
        details: Extra lines shown under the message (guidance, paths).
        value: Optional payload for the caller, such as a detected tool name.
    """

    status: StepStatus
    message: str
    details: List[str] = field(default_factory=list)
    value: Optional[Any] = None

    @classmethod
    def success(
        cls,
        message: str,
        details: Optional[List[str]] = None,
        value: Optional[Any] = None,
    ) -> "StepResult":
        return cls(StepStatus.SUCCESS, message, list(details or []), value)

    @classmethod
    def warning(
        cls, message: str, details: Optional[List[str]] = None
    ) -> "StepResult":
        return cls(StepStatus.WARNING, message, list(details or []))

    @classmethod
    def skipped(
        cls, message: str, details: Optional[List[str]] = None
    ) -> "StepResult":
        return cls(StepStatus.SKIPPED, message, list(details or []))

    @classmethod
    def fatal(
        cls, message: str, details: Optional[List[str]] = None
    ) -> "StepResult":
        return cls(StepStatus.FATAL, message, list(details or []))

    @property
    def is_fatal(self) -> bool:
        return self.status is StepStatus.FATAL


@dataclass
class SetupReport:
    """Ordered results of a setup run."""

    results: List[Tuple[str, StepResult]] = field(default_factory=list)

    def add(self, step_name: str, result: StepResult) -> None:
        self.results.append((step_name, result))

    @property
    def halted(self) -> bool:
        """True when a step ended with a fatal result."""
        return any(result.is_fatal for _, result in self.results)

    @property
    def warnings(self) -> List[Tuple[str, StepResult]]:
        return [
            (name, result)
            for name, result in self.results
            if result.status is StepStatus.WARNING
        ]

    @property
    def exit_code(self) -> int:
        return 1 if self.halted else 0

    def get(self, step_name: str) -> Optional[StepResult]:
        for name, result in self.results:
            if name == step_name:
                return result
        return None
