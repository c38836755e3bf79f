from __future__ import annotations

import sys

from pattern_demos.config import RuntimeConfig
from pattern_demos.console import ConsoleInput, ConsoleOutput
from pattern_demos.demo_orchestrator import DemoOrchestrator
from pattern_demos.logging_orchestrator import LoggingOrchestrator


def bootstrap_orchestrator(config: RuntimeConfig | None = None) -> DemoOrchestrator:
    config = config or RuntimeConfig()
    return DemoOrchestrator(
        output=ConsoleOutput(),
        console_input=ConsoleInput(),
        logger=LoggingOrchestrator(config.logger_name, config.log_level),
        config=config,
    )


def main() -> int:
    bootstrap_orchestrator().run_all()
    return 0


if __name__ == "__main__":
    sys.exit(main())
