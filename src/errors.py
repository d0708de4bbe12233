"""
Error taxonomy for the D&R Protocol.

Every failure the CLI reports maps to one exception type and exit code.
"""


class DRProtocolError(Exception):
    """Base class for all expected, user-visible failures."""

    exit_code = 1


class InputMissingError(DRProtocolError):
    """No text could be obtained from any input source."""

    exit_code = 2

    def __init__(self, message: str = None):
        super().__init__(
            message
            or "No input provided. Use --file, --issue, positional text, "
               "or pipe text into the script."
        )


class InputTooLargeError(DRProtocolError):
    """Input text exceeds the configured size guard."""

    exit_code = 3

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"Input too large ({size} chars > {limit} limit). Aborting."
        )


class IssueFetchError(DRProtocolError):
    """The GitHub CLI could not produce issue content."""

    exit_code = 1
