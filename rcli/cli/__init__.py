from .__main__ import EXIT_FATAL, EXIT_INVALID_INPUT, EXIT_SUCCESS, main

__all__ = ["main", "EXIT_SUCCESS", "EXIT_FATAL", "EXIT_INVALID_INPUT"]
