# File: ichigen/templates.py
"""
ichigen - Template Engine
=========================
Loads the bundled Go templates and renders them to disk with Jinja2.

``TemplateBundle`` is the read-only resource table. It is built once at
startup (from the packaged ``templates/`` directory, a user directory, or an
in-memory mapping) and handed to ``TemplateRenderer`` explicitly.

``TemplateRenderer.render`` materialises exactly one file, in five steps,
each with its own error:

    1. read resource        → ResourceReadError
    2. parse template       → TemplateParseError
    3. create directories   → DirectoryCreateError
    4. create/truncate file → FileCreateError
    5. execute template     → TemplateExecError (FileCreateError if the
                              write or close fails)

A failure after step 4 leaves a truncated file behind; nothing is rolled
back.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from jinja2 import (
    Environment,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateSyntaxError,
)

from ichigen.errors import (
    DirectoryCreateError,
    FileCreateError,
    ResourceReadError,
    TemplateExecError,
    TemplateParseError,
)
from ichigen.models import FillData
from ichigen.utils import ensure_directory, to_camel_case, to_pascal_case, to_snake_case

# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
logger: logging.Logger = logging.getLogger("ichigen.templates")

# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR: Path = Path(__file__).parent / "templates"
TEMPLATE_SUFFIX: str = ".go.j2"


# ---------------------------------------------------------------------------
# TemplateBundle
# ---------------------------------------------------------------------------


class TemplateBundle(Mapping[str, str]):
    """Immutable mapping of resource name → template source."""

    __slots__ = ("_sources", "origin")

    def __init__(self, sources: Mapping[str, str], origin: str = "<memory>") -> None:
        self._sources: Mapping[str, str] = MappingProxyType(dict(sources))
        self.origin: str = origin

    @classmethod
    def from_directory(cls, directory: Union[str, Path, None] = None) -> "TemplateBundle":
        """
        Read every ``*.go.j2`` file in *directory* (default: packaged templates).

        Raises:
            ResourceReadError: If the directory or one of its templates can't
                be read.
        """
        template_dir = Path(directory) if directory is not None else _DEFAULT_TEMPLATE_DIR
        if not template_dir.is_dir():
            raise ResourceReadError(template_dir, "not a directory")

        sources: Dict[str, str] = {}
        for path in sorted(template_dir.glob(f"*{TEMPLATE_SUFFIX}")):
            try:
                sources[path.name] = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise ResourceReadError(path, exc) from exc

        logger.debug("Loaded %d templates from %s", len(sources), template_dir)
        return cls(sources, origin=str(template_dir))

    def read(self, name: str) -> str:
        """Return the source of resource *name* or raise ResourceReadError."""
        try:
            return self._sources[name]
        except KeyError:
            raise ResourceReadError(name, f"no such template in {self.origin}") from None

    def __getitem__(self, name: str) -> str:
        return self._sources[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sources)

    def __len__(self) -> int:
        return len(self._sources)

    def __repr__(self) -> str:
        return f"<TemplateBundle {len(self)} templates from {self.origin}>"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """
    Renders bundle resources to files.

    The Jinja2 environment uses ``StrictUndefined`` so a template that
    references a field missing from the fill data fails loudly instead of
    producing an empty string.
    """

    def __init__(self, bundle: Optional[TemplateBundle] = None) -> None:
        self.bundle: TemplateBundle = bundle if bundle is not None else TemplateBundle.from_directory()
        self.env: Environment = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["pascal_case"] = to_pascal_case
        self.env.filters["camel_case"] = to_camel_case
        self.env.filters["snake_case"] = to_snake_case

    def parse(self, resource: str) -> Template:
        """Steps 1 and 2: read and compile *resource*."""
        source: str = self.bundle.read(resource)
        try:
            return self.env.from_string(source)
        except TemplateSyntaxError as exc:
            raise TemplateParseError(resource, f"line {exc.lineno}: {exc.message}") from exc

    def render(
        self,
        resource: str,
        output_path: Union[str, Path],
        data: Union[FillData, Mapping[str, Any]],
    ) -> Path:
        """
        Render *resource* with *data* into *output_path*.

        An existing file at *output_path* is truncated and overwritten.

        Returns:
            The path written.
        """
        template: Template = self.parse(resource)
        out = Path(output_path)
        context: Dict[str, Any] = data.context() if isinstance(data, FillData) else dict(data)

        try:
            ensure_directory(out.parent)
        except OSError as exc:
            raise DirectoryCreateError(out.parent, exc.strerror or exc) from exc

        try:
            handle = open(out, "w", encoding="utf-8")
        except OSError as exc:
            raise FileCreateError(out, exc.strerror or exc) from exc

        # close() flushes, so a full disk can surface only on exit.
        try:
            with handle:
                template.stream(**context).dump(handle)
        except TemplateError as exc:
            raise TemplateExecError(resource, exc) from exc
        except OSError as exc:
            raise FileCreateError(out, exc.strerror or exc) from exc
        except Exception as exc:
            # Errors raised by expressions in user templates (TypeError, ...).
            raise TemplateExecError(resource, f"{type(exc).__name__}: {exc}") from exc

        logger.debug("Rendered %s → %s", resource, out)
        return out


__all__: List[str] = [
    "TEMPLATE_SUFFIX",
    "TemplateBundle",
    "TemplateRenderer",
]
