from __future__ import annotations

from pattern_demos.console import ConsoleOutput
from pattern_demos.logging_orchestrator import LoggingOrchestrator
from pattern_demos.smart_home.actions import DeviceAction


class CommandHistory:
    """Executes device actions and keeps them on a LIFO stack for undo."""

    def __init__(self, output: ConsoleOutput, logger: LoggingOrchestrator) -> None:
        self._output = output
        self._logger = logger
        self._stack: list[DeviceAction] = []

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def can_undo(self) -> bool:
        return bool(self._stack)

    def peek_description(self) -> str:
        if not self._stack:
            return ""
        return self._stack[-1].description

    def execute(self, action: DeviceAction) -> None:
        action.execute()
        self._stack.append(action)
        self._logger.info(
            f"Executed action={action.description} history_depth={len(self._stack)}"
        )

    def undo(self) -> bool:
        if not self._stack:
            self._output.write_line("Nothing to undo")
            self._logger.info("Undo requested with empty history.")
            return False

        action = self._stack.pop()
        action.undo()
        self._logger.info(
            f"Undid action={action.description} history_depth={len(self._stack)}"
        )
        return True
