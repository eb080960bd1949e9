# common/orchestrator.py
# -*- coding: utf-8 -*-
"""
Centralized orchestrator for managing and executing sequences of setup steps.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from common.command_utils import get_symbols, log_message
from common.step_result import SetupReport, StepResult, StepStatus

_STATUS_LOG_LEVELS: Dict[StepStatus, str] = {
    StepStatus.SUCCESS: "success",
    StepStatus.WARNING: "warning",
    StepStatus.SKIPPED: "debug",
    StepStatus.FATAL: "error",
}

_STATUS_SYMBOL_KEYS: Dict[StepStatus, str] = {
    StepStatus.SUCCESS: "success",
    StepStatus.WARNING: "warning",
    StepStatus.SKIPPED: "skip",
    StepStatus.FATAL: "error",
}


class Orchestrator:
    """A centralized orchestrator to run a series of setup steps in order."""

    def __init__(
        self,
        app_settings: Any,
        context: Any,
        orchestrator_logger: Optional[logging.Logger] = None,
    ):
        """
        Initializes the Orchestrator.

        Args:
            app_settings: The application settings object.
            context: Per-run record handed to every step.
            orchestrator_logger: An optional logger instance.
        """
        self.app_settings = app_settings
        self.context = context
        self.logger = orchestrator_logger or logging.getLogger(__name__)
        self.tasks: List[Dict[str, Any]] = []

    def add_task(
        self,
        name: str,
        func: Callable[..., Optional[StepResult]],
        kwargs: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Adds a step to the execution list.

        Args:
            name: A human-readable name for the step.
            func: The step function. Called as
                func(app_settings=..., context=..., current_logger=..., **kwargs)
                and expected to return a StepResult.
            kwargs: Extra keyword arguments for the step function.
        """
        self.tasks.append({
            "name": name,
            "func": func,
            "kwargs": kwargs or {},
        })
        self.logger.debug(f"Task '{name}' added to the queue.")

    def _run_task(self, task: Dict[str, Any]) -> StepResult:
        task_name = task["name"]
        try:
            result = task["func"](
                app_settings=self.app_settings,
                context=self.context,
                current_logger=self.logger,
                **task["kwargs"],
            )
        except Exception as e:
            log_message(
                f"{get_symbols(self.app_settings).get('critical', '🔥')} Task '{task_name}' failed: {e}",
                "critical",
                self.logger,
                self.app_settings,
                exc_info=True,
            )
            return StepResult.fatal(str(e) or type(e).__name__)
        return result

    def _log_result(self, task_name: str, result: StepResult) -> None:
        symbols = get_symbols(self.app_settings)
        symbol = symbols.get(_STATUS_SYMBOL_KEYS[result.status], "")
        level = _STATUS_LOG_LEVELS[result.status]
        log_message(
            f"{symbol} {result.message}".strip(),
            level,
            self.logger,
            self.app_settings,
        )
        for detail in result.details:
            log_message(f"   {detail}", level, self.logger, self.app_settings)

    def run(self) -> SetupReport:
        """
        Executes all added steps in sequence.

        A step returning a fatal result, or raising, halts the run. Warnings
        and skipped steps never do.

        Returns:
            The SetupReport with one entry per executed step.
        """
        report = SetupReport()
        self.logger.debug("Orchestration started.")
        for i, task in enumerate(self.tasks):
            task_name = task["name"]
            self.logger.debug(
                f"--- Stage {i + 1}: Running task '{task_name}' ---"
            )

            result = self._run_task(task)
            report.add(task_name, result)
            self._log_result(task_name, result)

            if result.is_fatal:
                self.logger.debug(
                    f"Task '{task_name}' was fatal. Halting orchestration."
                )
                break

        self.logger.debug("Orchestration finished.")
        return report
