"""
Exit codes for TaskFeed CLI.

Semantic exit codes so scripts wrapping the dashboard can tell a bad
argument apart from an unreachable feed.

Codes 3, 5 and 6 are left unassigned so the numbering stays compatible with
the todopro family of tools, where they mean authentication failure, not
found and permission denied.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Feed could not be retrieved (network, URL, permission)
ERROR_NETWORK = 4

# Feed text is not a table
ERROR_SOURCE_FORMAT = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NETWORK: "ERROR_NETWORK",
        ERROR_SOURCE_FORMAT: "ERROR_SOURCE_FORMAT",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NETWORK: "Feed could not be fetched - check the URL and connection",
        ERROR_SOURCE_FORMAT: "Feed is not a CSV table - check the sheet is published as CSV",
    }
    return descriptions.get(code, "Unknown error")
