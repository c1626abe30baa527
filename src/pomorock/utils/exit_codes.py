"""
Exit codes for Pomorock.

Normal completion, quitting with 'q' and an interrupt signal all exit with
SUCCESS. Every path restores the terminal before control returns to the shell.
"""

# Success (completed, quit by user, interrupted)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Configuration file could not be read or written
ERROR_CONFIG = 3


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_CONFIG: "ERROR_CONFIG",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Timer finished, quit or was interrupted cleanly",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_CONFIG: "Configuration file could not be read or written",
    }
    return descriptions.get(code, "Unknown error")
