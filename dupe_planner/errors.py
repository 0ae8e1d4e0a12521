# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.


class DupePlannerError(Exception):
    """Base class for all errors raised by the duplicate planner."""


class NotADirectory(DupePlannerError, ValueError):
    """The scan root does not exist or is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Path '{path}' is not a folder or doesn't exist")
        self.path = path


class EntryReadFailure(DupePlannerError):
    """A file or directory could not be inspected during traversal."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Skipping {path} due to access error: {cause}")
        self.path = path
        self.cause = cause


class HashComputeFailure(DupePlannerError):
    """A file could not be read while computing its content digest."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Failed to hash {path}: {cause}")
        self.path = path
        self.cause = cause
