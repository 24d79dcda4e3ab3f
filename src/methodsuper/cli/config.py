"""
CLI Configuration

Centralized configuration for the methodsuper CLI.
"""

import os
from typing import Optional


class CLIConfig:
    """Configuration for CLI commands"""

    # Separator between module path and attribute path in targets
    TARGET_SEPARATOR = ":"

    # Machine mode (plain JSON/text output)
    _machine_mode: Optional[bool] = None

    @classmethod
    def set_machine_mode(cls, enabled: Optional[bool]) -> None:
        """Set machine mode (pure data output, no presentation)"""
        cls._machine_mode = enabled

    @classmethod
    def is_machine_mode(cls) -> bool:
        """
        Check if machine mode is active.

        Machine mode is the default. Returns False only if human mode is
        explicitly requested.
        """
        if cls._machine_mode is not None:
            return cls._machine_mode
        if os.getenv("METHODSUPER_HUMAN_MODE", "").lower() in ("1", "true", "yes"):
            return False
        return True
