# Error types for sevendate.
# Every user-visible failure is a SevenDateError carrying the process
# exit code the CLI boundary should use.

from __future__ import annotations


class SevenDateError(Exception):
    exit_code: int = 1


class ArgumentError(SevenDateError):
    # More than one non-flag token on the command line.
    exit_code = 2

    def __init__(self, token: str) -> None:
        super().__init__(f"Unrecognized argument: '{token}'")
        self.token = token


class FileAccessError(SevenDateError):
    # The metadata of the requested file could not be read.
    exit_code = 1

    def __init__(self, path: str) -> None:
        super().__init__(f"Error reading the file info for '{path}'")
        self.path = path
