"""
Exit codes for ChatBot CLI.

``chatbot run`` maps the outcome of a single command line to these codes so
scripts can tell a rejected command from a crash.
"""

# Success
SUCCESS = 0

# Unexpected failure
ERROR_GENERAL = 1

# The command line was understood but rejected (bad index, empty argument, ...)
ERROR_INVALID_ARGS = 2


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    }
    return code_names.get(code, f"UNKNOWN({code})")
