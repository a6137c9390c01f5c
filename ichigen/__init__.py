"""
ichigen — Go Schematic Generator
================================

Scaffolds the boilerplate files of a layered Go application (DTO, validator,
repository, service, controller, plus the domain's ``providers.go`` and
``registry.go``) from a component type, an entity name and a domain.

Architecture overview::

    ┌──────────────┐     ┌───────────────────┐     ┌──────────────────┐
    │  CLI / Entry │────▶│ ScaffoldGenerator │────▶│ TemplateRenderer │
    │   (cli.py)   │     │  (generator.py)   │     │  (templates.py)  │
    └──────────────┘     └─────────┬─────────┘     └──────────────────┘
                                   │
                        ┌──────────┼──────────┐
                        ▼          ▼          ▼
                  ┌──────────┐ ┌────────┐ ┌─────────┐
                  │  models  │ │ config │ │  utils  │
                  └──────────┘ └────────┘ └─────────┘

Usage::

    # As a library
    from ichigen import GenerationSpec, ScaffoldGenerator
    spec = GenerationSpec.from_request("full", "product", "catalog", crud=True)
    ScaffoldGenerator(output_root=".").generate(spec)

    # From the command line
    ichigen g full product --domain=catalog --crud
"""

from __future__ import annotations

__version__: str = "0.1.0"
__license__: str = "MIT"

from ichigen.errors import (
    ConfigError,
    DirectoryCreateError,
    FileCreateError,
    GenerationError,
    IchigenError,
    InputError,
    MissingDomainError,
    MissingNameError,
    ResourceReadError,
    TemplateExecError,
    TemplateParseError,
    UnknownTypeError,
)
from ichigen.models import (
    FULL_STACK_ORDER,
    ComponentKind,
    ComponentType,
    FillData,
    GenerationSpec,
    GeneratorSettings,
)
from ichigen.utils import to_camel_case, to_pascal_case, to_snake_case
from ichigen.templates import TemplateBundle, TemplateRenderer
from ichigen.config import load_settings, resolve_module_path
from ichigen.generator import GenerationReport, GenerationStep, ScaffoldGenerator

__all__: list[str] = [
    "__version__",
    "__license__",
    # Orchestrator
    "ScaffoldGenerator",
    "GenerationReport",
    "GenerationStep",
    # Models
    "ComponentKind",
    "ComponentType",
    "FULL_STACK_ORDER",
    "FillData",
    "GenerationSpec",
    "GeneratorSettings",
    # Templates
    "TemplateBundle",
    "TemplateRenderer",
    # Config
    "load_settings",
    "resolve_module_path",
    # Utilities
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    # Errors
    "IchigenError",
    "InputError",
    "GenerationError",
    "MissingDomainError",
    "MissingNameError",
    "UnknownTypeError",
    "ConfigError",
    "ResourceReadError",
    "TemplateParseError",
    "DirectoryCreateError",
    "FileCreateError",
    "TemplateExecError",
]
