from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    initial_temperature: int = 22
    temperature_step: int = 1
    condiments_prompt: str = "Add condiments (y/n)? "
    condiments_yes_answer: str = "y"
    system_sender: str = "System"
    logger_name: str = "pattern_demos"
    log_level: int = logging.WARNING
