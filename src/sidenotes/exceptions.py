#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the sidenotes library.

The transform itself never raises for problems in the document: footnotes it
cannot convert are left in place and reported through logging. These
exceptions cover the host side of the library: reading and parsing input,
writing output, option validation and strict-mode reporting.

Exception Hierarchy
-------------------
- SidenotesError (base exception)

  - ValidationError (parameter/option validation)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, decoding failures)

  - ParsingError (input document parsing failures)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

  - TransformError (tree transformation failures)
    - IncompleteTransformError (footnotes left unconverted in strict mode)

  - DependencyError (missing HTML parser backends)

"""

from typing import Any


class SidenotesError(Exception):
    """Base exception class for all sidenotes-specific errors.

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


class ValidationError(SidenotesError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class FileError(SidenotesError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize with the missing file path."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file exists but cannot be read or decoded."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize with the inaccessible file path."""
        if message is None:
            message = f"Cannot read file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(SidenotesError):
    """Exception raised when the input document cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(SidenotesError):
    """Exception raised when the transformed tree cannot be serialized or written."""

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing the output file fails."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize with the output file path."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="write", original_error=original_error)
        self.file_path = file_path


class TransformError(SidenotesError):
    """Exception raised when a tree transformation fails.

    Parameters
    ----------
    message : str
        Description of the failure
    transform_name : str, optional
        Name of the transform that failed
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, transform_name: str | None = None, original_error: Exception | None = None):
        """Initialize the transform error."""
        super().__init__(message, original_error)
        self.transform_name = transform_name


class IncompleteTransformError(TransformError):
    """Exception raised in strict mode when footnotes survive the transform.

    Parameters
    ----------
    remaining_ids : list of str
        Ids of the footnote items still in a footnotes container

    """

    def __init__(self, remaining_ids: list[str], message: str | None = None):
        """Initialize with the ids of the footnotes that were not converted."""
        if message is None:
            listed = ", ".join(remaining_ids) or "(unnamed)"
            message = f"{len(remaining_ids)} footnote(s) could not be converted to sidenotes: {listed}"
        super().__init__(message, transform_name="sidenotes")
        self.remaining_ids = list(remaining_ids)


class DependencyError(SidenotesError):
    """Exception raised when an optional parser backend is not installed.

    Parameters
    ----------
    message : str
        Description of the problem
    missing_packages : list[tuple[str, str]], optional
        (package_name, version_spec) tuples for the missing packages
    original_error : Exception, optional
        The original exception, typically ``bs4.FeatureNotFound``

    """

    def __init__(
        self,
        message: str,
        missing_packages: list[tuple[str, str]] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error with installation hints."""
        self.missing_packages = missing_packages or []
        if self.missing_packages:
            names = " ".join(name for name, _ in self.missing_packages)
            message = f"{message}\nInstall with: pip install {names}"
        super().__init__(message, original_error)
