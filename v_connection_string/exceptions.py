"""
Copyright (c) v-connection-string contributors.
Licensed under the MIT license.
This module contains the exceptions raised by v_connection_string.
"""

from typing import List, Union


class Error(Exception):
    """
    Base class for errors.
    This is the base class for all exceptions raised by this package.
    It can be used to catch any error produced while handling a connection descriptor.
    """
    def __init__(self, message="An error occurred") -> None:
        self.message = message
        super().__init__(self.message)


class InterfaceError(Error):
    """
    Error related to the client interface.
    This exception is raised for errors in how a connection descriptor was
    supplied, as opposed to errors reported by a server.
    """
    def __init__(self, message="An interface error occurred") -> None:
        super().__init__(message)


class ConnectionStringParseError(InterfaceError):
    """
    Raised when a connection descriptor cannot be decoded.

    All problems found in one descriptor are collected and reported together.
    The individual messages are available through ``errors``.
    """
    def __init__(self, errors: Union[str, List[str]]) -> None:
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        if len(self.errors) == 1:
            message = f"Connection string parsing failed: {self.errors[0]}"
        else:
            message = "Connection string parsing failed:\n" + "\n".join(
                f"  - {error}" for error in self.errors
            )
        super().__init__(message)
