#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the htmltoc library.

This module defines specialized exception classes for the error conditions
that can occur while resolving options and generating a table of contents.

Exception Hierarchy
-------------------
- HtmlTocError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigurationError (invalid option values, unreadable config files)

  - ParsingError (input document parsing failures)
    - MalformedInputError (markup rejected by the HTML parser)

  - RenderingError (template lookup and rendering failures)

  - DependencyError (missing parser backend packages)

"""

from __future__ import annotations

from typing import Any, Iterable


class HtmlTocError(Exception):
    """Base exception class for all htmltoc-specific errors.

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


class ValidationError(HtmlTocError):
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


class ConfigurationError(ValidationError):
    """Exception raised when TOC configuration cannot be resolved.

    Raised while options are resolved, before any document is touched. When
    the offending option is an enumeration, the message names the invalid
    value and the allowed set.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    parameter_name : str, optional
        Name of the offending option
    parameter_value : any, optional
        The offending value
    allowed_values : iterable of str, optional
        The accepted values for an enumerated option
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        allowed_values: Iterable[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the configuration error."""
        super().__init__(
            message, parameter_name=parameter_name, parameter_value=parameter_value, original_error=original_error
        )
        self.allowed_values = tuple(allowed_values) if allowed_values is not None else None

    @classmethod
    def invalid_choice(cls, parameter_name: str, value: Any, allowed_values: Iterable[str]) -> ConfigurationError:
        """Build the error for a value outside an enumerated option's choices."""
        allowed = tuple(allowed_values)
        message = (
            f"Invalid value {value!r} for option '{parameter_name}'. "
            f"Allowed values: {', '.join(repr(a) for a in allowed)}"
        )
        return cls(message, parameter_name=parameter_name, parameter_value=value, allowed_values=allowed)


class ParsingError(HtmlTocError):
    """Exception raised when an input document cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing error
    original_error : Exception, optional
        The original exception that caused this error

    """


class MalformedInputError(ParsingError):
    """Exception raised when the HTML parser rejects the input markup.

    ``inject_toc`` recovers from this error locally: the TOC is skipped and the
    content is returned unchanged.
    """


class RenderingError(HtmlTocError):
    """Exception raised when a page template cannot be loaded or rendered.

    Parameters
    ----------
    message : str
        Description of the rendering error
    template : str, optional
        Name or path of the template involved
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, template: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.template = template


class DependencyError(HtmlTocError):
    """Exception raised when a required parser backend is not installed.

    Parameters
    ----------
    message : str
        Description of the dependency problem
    package_name : str, optional
        Name of the missing package
    install_hint : str, optional
        Command that installs the missing package

    """

    def __init__(
        self,
        message: str,
        package_name: str | None = None,
        install_hint: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error."""
        if install_hint:
            message = f"{message}\nInstall with: {install_hint}"
        super().__init__(message, original_error=original_error)
        self.package_name = package_name
        self.install_hint = install_hint


__all__ = [
    "HtmlTocError",
    "ValidationError",
    "ConfigurationError",
    "ParsingError",
    "MalformedInputError",
    "RenderingError",
    "DependencyError",
]
