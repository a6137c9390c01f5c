# File: ichigen/models.py
"""
ichigen - Core Data Models
==========================
Pydantic V2 models describing a scaffolding request and everything derived
from it. These models are the single source of truth for the pipeline:

    CLI arguments → GenerationSpec → FillData → templates

Component types are a closed enumeration: string aliases are resolved once,
when the ``GenerationSpec`` is built, and never again deeper in the pipeline.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ichigen.errors import MissingDomainError, MissingNameError, UnknownTypeError
from ichigen.utils import to_camel_case, to_pascal_case, to_snake_case

# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
logger: logging.Logger = logging.getLogger("ichigen.models")

DEFAULT_MODULE_PATH: str = "ichi-go"
APPLICATIONS_ROOT: Tuple[str, ...] = ("internal", "applications")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ComponentKind(str, Enum):
    """A single renderable file kind."""

    DTO = "dto"
    VALIDATOR = "validator"
    REPOSITORY = "repository"
    SERVICE = "service"
    CONTROLLER = "controller"
    PROVIDERS = "providers"
    REGISTRY = "registry"

    @property
    def resource(self) -> str:
        """Template resource name, e.g. ``dto.go.j2``."""
        return f"{self.value}.go.j2"

    @property
    def folder(self) -> Optional[str]:
        """Sub-folder under the domain root; None for domain wiring files."""
        return _KIND_FOLDERS.get(self)

    @property
    def is_wiring(self) -> bool:
        return self.folder is None

    def file_name(self, lower_name: str) -> str:
        if self.is_wiring:
            return f"{self.value}.go"
        return f"{lower_name}_{self.value}.go"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_FOLDERS: Dict[ComponentKind, str] = {
    ComponentKind.DTO: "dto",
    ComponentKind.VALIDATOR: "validators",
    ComponentKind.REPOSITORY: "repository",
    ComponentKind.SERVICE: "service",
    ComponentKind.CONTROLLER: "controller",
}

_KIND_LABELS: Dict[ComponentKind, str] = {
    ComponentKind.DTO: "DTO",
    ComponentKind.VALIDATOR: "Validator",
    ComponentKind.REPOSITORY: "Repository",
    ComponentKind.SERVICE: "Service",
    ComponentKind.CONTROLLER: "Controller",
    ComponentKind.PROVIDERS: "Providers",
    ComponentKind.REGISTRY: "Registry",
}

# Order matters: it is the render order, the reporting order, and decides
# which files exist after a failure part-way through.
FULL_STACK_ORDER: Tuple[ComponentKind, ...] = (
    ComponentKind.DTO,
    ComponentKind.VALIDATOR,
    ComponentKind.REPOSITORY,
    ComponentKind.SERVICE,
    ComponentKind.CONTROLLER,
    ComponentKind.PROVIDERS,
    ComponentKind.REGISTRY,
)


class ComponentType(str, Enum):
    """What a user can ask for on the command line."""

    CONTROLLER = "controller"
    SERVICE = "service"
    REPOSITORY = "repository"
    VALIDATOR = "validator"
    DTO = "dto"
    FULL = "full"

    @classmethod
    def parse(cls, value: str) -> "ComponentType":
        """Resolve a type name or alias. Matching is case-sensitive."""
        if value in _TYPE_ALIASES:
            return _TYPE_ALIASES[value]
        try:
            return cls(value)
        except ValueError:
            raise UnknownTypeError(value, [t.value for t in cls]) from None

    @property
    def kinds(self) -> Tuple[ComponentKind, ...]:
        if self is ComponentType.FULL:
            return FULL_STACK_ORDER
        return (ComponentKind(self.value),)


_TYPE_ALIASES: Dict[str, ComponentType] = {
    "c": ComponentType.CONTROLLER,
    "s": ComponentType.SERVICE,
    "r": ComponentType.REPOSITORY,
    "repo": ComponentType.REPOSITORY,
    "v": ComponentType.VALIDATOR,
    "d": ComponentType.DTO,
    "f": ComponentType.FULL,
}


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

_FROZEN_CONFIG: ConfigDict = ConfigDict(
    frozen=True,
    extra="forbid",
    populate_by_name=True,
)


class GenerationSpec(BaseModel):
    """
    A single scaffolding request.

    Validation raises ichigen errors rather than pydantic ones, however the
    model is built: type names and aliases go through ``ComponentType.parse``
    and an empty domain or name is rejected.
    """

    model_config = _FROZEN_CONFIG

    component_type: ComponentType = Field(..., description="What to generate.")
    name: str = Field(..., description="Entity name, free-form (e.g. 'order_item').")
    domain: str = Field(..., description="Domain folder under internal/applications.")
    crud: bool = Field(default=False, description="Render CRUD operations.")

    @field_validator("component_type", mode="before")
    @classmethod
    def _parse_component_type(cls, value: Any) -> ComponentType:
        if isinstance(value, ComponentType):
            return value
        return ComponentType.parse(value)

    @field_validator("domain")
    @classmethod
    def _require_domain(cls, value: str) -> str:
        if not value:
            raise MissingDomainError()
        return value

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value:
            raise MissingNameError()
        return value

    @classmethod
    def from_request(
        cls,
        component_type: str,
        name: str,
        domain: str,
        crud: bool = False,
    ) -> "GenerationSpec":
        """
        Build a spec from raw user input.

        Raises:
            MissingDomainError: If *domain* is empty.
            MissingNameError: If *name* is empty.
            UnknownTypeError: If *component_type* is not a type or alias.
        """
        # Fields validate in declaration order, which would report the type first.
        if not domain:
            raise MissingDomainError()
        if not name:
            raise MissingNameError()
        return cls(
            component_type=component_type,
            name=name,
            domain=domain,
            crud=crud,
        )

    def __repr__(self) -> str:
        return f"<GenerationSpec {self.component_type.value} {self.name!r} in {self.domain!r}>"


# ---------------------------------------------------------------------------
# Template fill data
# ---------------------------------------------------------------------------


class FillData(BaseModel):
    """Everything a template may reference. Immutable once built."""

    model_config = _FROZEN_CONFIG

    package_name: str
    struct_name: str
    var_name: str
    domain: str
    lower_name: str
    table_name: str
    has_crud: bool
    module_path: str = DEFAULT_MODULE_PATH

    @classmethod
    def from_spec(
        cls,
        spec: GenerationSpec,
        module_path: str = DEFAULT_MODULE_PATH,
    ) -> "FillData":
        return cls(
            package_name=spec.domain,
            struct_name=to_pascal_case(spec.name),
            var_name=to_camel_case(spec.name),
            domain=spec.domain,
            lower_name=spec.name.lower(),
            # Naive pluralisation: always a bare "s".
            table_name=to_snake_case(spec.name) + "s",
            has_crud=spec.crud,
            module_path=module_path,
        )

    def context(self) -> Dict[str, Any]:
        """Template rendering context."""
        return self.model_dump()


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class GeneratorSettings(BaseModel):
    """Settings read from ``.ichigen.yaml`` (all optional)."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    output_root: str = Field(
        default=".",
        min_length=1,
        description="Project root; generated paths are relative to it.",
    )
    module_path: Optional[str] = Field(
        default=None,
        description="Go module path for imports. Read from go.mod when unset.",
    )
    templates_dir: Optional[str] = Field(
        default=None,
        description="Directory of custom *.go.j2 templates replacing the bundled ones.",
    )


__all__: List[str] = [
    "DEFAULT_MODULE_PATH",
    "APPLICATIONS_ROOT",
    "ComponentKind",
    "ComponentType",
    "FULL_STACK_ORDER",
    "GenerationSpec",
    "FillData",
    "GeneratorSettings",
]
