# File: ichigen/errors.py
"""
ichigen - Error Taxonomy
========================
Every failure the generator can report. All errors are fatal to the current
invocation: nothing is retried and nothing is rolled back.

Hierarchy::

    IchigenError
    ├── InputError              rejected before anything touches the disk
    │   ├── MissingDomainError
    │   ├── MissingNameError
    │   ├── UnknownTypeError
    │   └── ConfigError
    └── GenerationError         raised while rendering a single file
        ├── ResourceReadError
        ├── TemplateParseError
        ├── DirectoryCreateError
        ├── FileCreateError
        └── TemplateExecError

Generation errors keep the underlying exception as ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union


class IchigenError(Exception):
    """Base class for all ichigen errors."""


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------


class InputError(IchigenError):
    """The request itself is invalid; no file has been written."""


class MissingDomainError(InputError):
    def __init__(self) -> None:
        super().__init__("domain is required (use --domain=<domain>)")


class MissingNameError(InputError):
    def __init__(self) -> None:
        super().__init__("entity name is required")


class UnknownTypeError(InputError):
    def __init__(self, value: str, known: Optional[List[str]] = None) -> None:
        self.value: str = value
        message = f"unknown type: {value}"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message)


class ConfigError(InputError):
    """The settings file could not be read, parsed or validated."""


# ---------------------------------------------------------------------------
# Generation errors
# ---------------------------------------------------------------------------


class GenerationError(IchigenError):
    """A single render step failed. ``target`` is the resource name or path."""

    action: str = "generate"

    def __init__(self, target: Union[str, Path], reason: object = None) -> None:
        self.target: str = str(target)
        message = f"failed to {self.action} {self.target}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)


class ResourceReadError(GenerationError):
    action = "read template"


class TemplateParseError(GenerationError):
    action = "parse template"


class DirectoryCreateError(GenerationError):
    action = "create directory"


class FileCreateError(GenerationError):
    action = "create file"


class TemplateExecError(GenerationError):
    action = "execute template"


__all__: List[str] = [
    "IchigenError",
    "InputError",
    "MissingDomainError",
    "MissingNameError",
    "UnknownTypeError",
    "ConfigError",
    "GenerationError",
    "ResourceReadError",
    "TemplateParseError",
    "DirectoryCreateError",
    "FileCreateError",
    "TemplateExecError",
]
