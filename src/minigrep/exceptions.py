#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the minigrep package.

Every failure minigrep can report is raised as one of these classes. Library
code never recovers from them; the command-line entry point catches them,
prints a description to stderr and maps each family to an exit status.

Exception Hierarchy
-------------------
- MinigrepError (base exception)

  - ConfigurationError (resolving the run configuration)
    - ArgumentError (command-line arguments)
      - MissingArgumentError (too few positional arguments)
      - UnrecognizedFlagError (unknown ``--`` token)
    - EnvironmentOverrideError (``IGNORE_CASE`` is not a boolean literal)

  - FileError (reading the target file)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, directories, other OS errors)
    - FileDecodeError (contents are not valid UTF-8)

"""

from typing import Any


class MinigrepError(Exception):
    """Base exception class for all minigrep-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigurationError(MinigrepError):
    """Base exception for failures while resolving the run configuration.

    Configuration errors are always raised before the target file is touched.
    """


class ArgumentError(ConfigurationError):
    """Exception raised for invalid command-line arguments.

    Parameters
    ----------
    message : str
        Description of the argument error
    parameter_name : str, optional
        Name of the offending argument
    parameter_value : any, optional
        The offending token, if there was one
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic argument
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the argument error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class MissingArgumentError(ArgumentError):
    """Exception raised when a required positional argument is absent.

    Parameters
    ----------
    parameter_name : str
        Name of the missing argument (``query`` or ``file_path``)
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, parameter_name: str, message: str | None = None):
        """Initialize the missing argument error."""
        if message is None:
            message = f"missing required argument: {parameter_name}"
        super().__init__(message, parameter_name=parameter_name)


class UnrecognizedFlagError(ArgumentError):
    """Exception raised for a ``--`` token that is not a known flag.

    Parameters
    ----------
    flag : str
        The unrecognized token, verbatim
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, flag: str, message: str | None = None):
        """Initialize the unrecognized flag error."""
        if message is None:
            message = f"unrecognized flag: {flag}"
        super().__init__(message, parameter_name="flag", parameter_value=flag)
        self.flag = flag


class EnvironmentOverrideError(ConfigurationError):
    """Exception raised when an override variable holds an unparseable value.

    An absent variable is never an error; only a present variable whose
    text is not an accepted literal raises this.

    Parameters
    ----------
    variable_name : str
        Name of the environment variable
    value : str
        The raw text found in the environment
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    Attributes
    ----------
    variable_name : str
        Name of the environment variable
    value : str
        The rejected value

    """

    def __init__(self, variable_name: str, value: str, message: str | None = None):
        """Initialize the environment override error."""
        if message is None:
            message = f'invalid value for environment variable {variable_name}: expected "true" or "false", got {value!r}'
        super().__init__(message)
        self.variable_name = variable_name
        self.value = value


class FileError(MinigrepError):
    """Base exception for errors reading the target file.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when a file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file cannot be opened or read.

    This includes permission errors, directories given as files, etc.
    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileDecodeError(FileError):
    """Exception raised when file contents are not valid text in the expected encoding."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file decode error."""
        if message is None:
            message = f"File is not valid UTF-8 text: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)
