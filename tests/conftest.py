"""
tests/conftest.py
Shared fixtures for the ichigen test suite.

No mocking is used; real file I/O is performed inside temporary directories
managed by pytest's tmp_path fixture.
"""

from __future__ import annotations

import pathlib
from typing import Callable, Dict, List, Tuple

import pytest

from ichigen.generator import ScaffoldGenerator
from ichigen.models import ComponentKind, GenerationSpec
from ichigen.templates import TemplateBundle, TemplateRenderer


# ---------------------------------------------------------------------------
# Template fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def packaged_bundle() -> TemplateBundle:
    """The templates shipped with the package, loaded once per session."""
    return TemplateBundle.from_directory()


@pytest.fixture()
def renderer(packaged_bundle: TemplateBundle) -> TemplateRenderer:
    return TemplateRenderer(packaged_bundle)


# ---------------------------------------------------------------------------
# Generator fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def output_root(tmp_path: pathlib.Path) -> pathlib.Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture()
def written_log() -> List[Tuple[ComponentKind, pathlib.Path]]:
    """Collects (kind, path) pairs reported by the generator callback."""
    return []


@pytest.fixture()
def generator(
    renderer: TemplateRenderer,
    output_root: pathlib.Path,
    written_log: List[Tuple[ComponentKind, pathlib.Path]],
) -> ScaffoldGenerator:
    return ScaffoldGenerator(
        renderer,
        output_root=output_root,
        on_file_written=lambda kind, path: written_log.append((kind, path)),
    )


@pytest.fixture()
def make_generator(
    output_root: pathlib.Path,
    written_log: List[Tuple[ComponentKind, pathlib.Path]],
) -> Callable[[Dict[str, str]], ScaffoldGenerator]:
    """Build a generator over an in-memory template bundle."""

    def _make(sources: Dict[str, str]) -> ScaffoldGenerator:
        return ScaffoldGenerator(
            TemplateRenderer(TemplateBundle(sources)),
            output_root=output_root,
            on_file_written=lambda kind, path: written_log.append((kind, path)),
        )

    return _make


@pytest.fixture()
def full_product_spec() -> GenerationSpec:
    return GenerationSpec.from_request("full", "product", "catalog")
