# File: ichigen/generator.py
"""
ichigen - Generation Pipeline (Orchestrator)
============================================

Connects every phase together:

    GenerationSpec → FillData → plan → render each step

The plan is an ordered tuple of ``GenerationStep`` objects: one for a single
component, seven for a full stack. ``ScaffoldGenerator.generate`` folds over
the plan and stops at the first error, which propagates unchanged. Files
written by earlier steps stay on disk.

Output layout (relative to the output root)::

    internal/applications/<domain>/<folder>/<lower_name>_<kind>.go
    internal/applications/<domain>/providers.go
    internal/applications/<domain>/registry.go
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from ichigen.errors import MissingDomainError
from ichigen.models import (
    APPLICATIONS_ROOT,
    DEFAULT_MODULE_PATH,
    ComponentKind,
    FillData,
    GenerationSpec,
)
from ichigen.templates import TemplateRenderer
from ichigen.utils import Timer

# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
logger: logging.Logger = logging.getLogger("ichigen.generator")

FileWrittenCallback = Callable[[ComponentKind, Path], None]


# ---------------------------------------------------------------------------
# Plan and report
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GenerationStep:
    """One file to render."""

    kind: ComponentKind
    resource: str
    output_path: Path


@dataclass
class GenerationReport:
    """Outcome of a successful ``ScaffoldGenerator.generate`` call."""

    spec: GenerationSpec
    written: List[Path] = field(default_factory=list)
    kinds: List[ComponentKind] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def total_files(self) -> int:
        return len(self.written)

    def summary(self) -> str:
        lines: List[str] = ["✓ Complete stack generated:"]
        lines.extend(f"  - {kind.label}" for kind in self.kinds)
        return "\n".join(lines)


def component_path(root: Union[str, Path], kind: ComponentKind, data: FillData) -> Path:
    """Output path for *kind* under *root*."""
    domain_root = Path(root).joinpath(*APPLICATIONS_ROOT, data.domain)
    if kind.is_wiring:
        return domain_root / kind.file_name(data.lower_name)
    return domain_root / kind.folder / kind.file_name(data.lower_name)


# ---------------------------------------------------------------------------
# ScaffoldGenerator
# ---------------------------------------------------------------------------


class ScaffoldGenerator:
    """
    Orchestrates template rendering for one request at a time.

    Usage::

        generator = ScaffoldGenerator(TemplateRenderer(), output_root=".")
        spec = GenerationSpec.from_request("full", "product", "catalog")
        report = generator.generate(spec)

    The generator holds no per-run state; ``generate`` can be called any
    number of times.
    """

    def __init__(
        self,
        renderer: Optional[TemplateRenderer] = None,
        *,
        output_root: Union[str, Path] = ".",
        module_path: str = DEFAULT_MODULE_PATH,
        on_file_written: Optional[FileWrittenCallback] = None,
    ) -> None:
        self.renderer: TemplateRenderer = renderer if renderer is not None else TemplateRenderer()
        self.output_root: Path = Path(output_root)
        self.module_path: str = module_path
        self.on_file_written: Optional[FileWrittenCallback] = on_file_written

    def fill_data(self, spec: GenerationSpec) -> FillData:
        return FillData.from_spec(spec, module_path=self.module_path)

    def plan(self, spec: GenerationSpec) -> Tuple[GenerationStep, ...]:
        """Ordered steps for *spec*. Pure: touches neither templates nor disk."""
        data = self.fill_data(spec)
        return tuple(
            GenerationStep(
                kind=kind,
                resource=kind.resource,
                output_path=component_path(self.output_root, kind, data),
            )
            for kind in spec.component_type.kinds
        )

    def generate(self, spec: GenerationSpec) -> GenerationReport:
        """
        Render every step of the plan for *spec*, in order.

        Raises:
            MissingDomainError: If ``spec.domain`` is empty. Nothing is written.
            GenerationError: From the first failing step. Earlier files remain.
        """
        if not spec.domain:
            raise MissingDomainError()

        data = self.fill_data(spec)
        steps = self.plan(spec)
        report = GenerationReport(spec=spec)
        logger.info(
            "Generating %s for %r in domain %r (%d file(s)).",
            spec.component_type.value,
            spec.name,
            spec.domain,
            len(steps),
        )

        with Timer(f"generate {spec.component_type.value}") as timer:
            for step in steps:
                path = self.renderer.render(step.resource, step.output_path, data)
                report.written.append(path)
                report.kinds.append(step.kind)
                logger.info("Created %s", path)
                if self.on_file_written is not None:
                    self.on_file_written(step.kind, path)

        report.elapsed_seconds = timer.elapsed
        return report


__all__: List[str] = [
    "GenerationStep",
    "GenerationReport",
    "ScaffoldGenerator",
    "component_path",
]
