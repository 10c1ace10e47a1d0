#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdoverlay library.

This module defines specialized exception classes for the error conditions
that can occur while configuring and running a decoration pass. Decoration
computation itself is fail-soft: malformed structural input skips the
affected decoration rather than raising. Errors surface at configuration
time, while parsing source text, or inside a sink.

Exception Hierarchy
-------------------
- MdOverlayError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigurationError (invalid render configuration)

  - ParsingError (source text or config file parsing failures)

  - RenderingError (sink/output failures)

"""

from typing import Any


class MdOverlayError(Exception):
    """Base exception class for all mdoverlay-specific errors.

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


class ValidationError(MdOverlayError):
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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
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
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ConfigurationError(ValidationError):
    """Exception raised when a render configuration is invalid.

    Raised once, while the configuration value is constructed, so that no
    render pass ever starts with an unusable configuration (for example an
    empty bullet list or an unknown table style).

    Parameters
    ----------
    message : str
        Description of the configuration problem
    parameter_name : str, optional
        Dotted path of the offending option (e.g. ``"highlights.heading.backgrounds"``)
    parameter_value : any, optional
        The rejected value
    original_error : Exception, optional
        The original exception that caused this error

    """


class ParsingError(MdOverlayError):
    """Exception raised when source text or a configuration file cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage of parsing where the error occurred (e.g. ``"config"``, ``"tree_sitter"``)
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parsing_stage : str or None
        The stage where parsing failed

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with stage information."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class RenderingError(MdOverlayError):
    """Exception raised when decorations cannot be delivered or written.

    The decoration engine never raises this for malformed documents; it is
    reserved for sinks and output stages.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage of rendering where the error occurred (e.g. ``"sink"``, ``"output"``)
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error with stage information."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


__all__ = [
    "MdOverlayError",
    "ValidationError",
    "ConfigurationError",
    "ParsingError",
    "RenderingError",
]
