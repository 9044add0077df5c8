from typing import Any


class TreeError(Exception):
    default_message = "TreeError"

    def __init__(self, value: Any = None, message: str = "") -> None:
        self.value = value
        super().__init__(message or self.default_message)


class ValueAlreadyStored(TreeError):
    """Raised when a duplicate is added to a tree that only accepts unique values."""

    default_message = (
        "TreeError: Caller attempted to add a duplicate value to a tree "
        "that only accepts unique values."
    )


class ValueNotFound(TreeError):
    """Raised when the value to drop is not in the tree."""

    default_message = "TreeError: Specified value was not found in the tree."
