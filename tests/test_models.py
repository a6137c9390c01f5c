"""
tests/test_models.py
Unit tests for ichigen.models: component types, request parsing and
fill-data derivation.
"""

from __future__ import annotations

import pydantic
import pytest

from ichigen.errors import MissingDomainError, MissingNameError, UnknownTypeError
from ichigen.models import (
    DEFAULT_MODULE_PATH,
    FULL_STACK_ORDER,
    ComponentKind,
    ComponentType,
    FillData,
    GenerationSpec,
    GeneratorSettings,
)


# ===========================================================================
# Component types
# ===========================================================================


class TestComponentType:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("controller", ComponentType.CONTROLLER),
            ("c", ComponentType.CONTROLLER),
            ("service", ComponentType.SERVICE),
            ("s", ComponentType.SERVICE),
            ("repository", ComponentType.REPOSITORY),
            ("r", ComponentType.REPOSITORY),
            ("repo", ComponentType.REPOSITORY),
            ("validator", ComponentType.VALIDATOR),
            ("v", ComponentType.VALIDATOR),
            ("dto", ComponentType.DTO),
            ("d", ComponentType.DTO),
            ("full", ComponentType.FULL),
            ("f", ComponentType.FULL),
        ],
    )
    def test_parse_names_and_aliases(self, value: str, expected: ComponentType) -> None:
        assert ComponentType.parse(value) is expected

    @pytest.mark.parametrize("value", ["model", "Controller", "providers", "registry", ""])
    def test_parse_rejects_unknown(self, value: str) -> None:
        with pytest.raises(UnknownTypeError) as exc_info:
            ComponentType.parse(value)
        assert exc_info.value.value == value

    def test_full_expands_in_fixed_order(self) -> None:
        assert ComponentType.FULL.kinds == (
            ComponentKind.DTO,
            ComponentKind.VALIDATOR,
            ComponentKind.REPOSITORY,
            ComponentKind.SERVICE,
            ComponentKind.CONTROLLER,
            ComponentKind.PROVIDERS,
            ComponentKind.REGISTRY,
        )
        assert ComponentType.FULL.kinds == FULL_STACK_ORDER

    def test_single_types_expand_to_one_kind(self) -> None:
        assert ComponentType.VALIDATOR.kinds == (ComponentKind.VALIDATOR,)
        assert ComponentType.DTO.kinds == (ComponentKind.DTO,)


class TestComponentKind:
    def test_folders(self) -> None:
        assert ComponentKind.VALIDATOR.folder == "validators"
        assert ComponentKind.DTO.folder == "dto"
        assert ComponentKind.PROVIDERS.folder is None
        assert ComponentKind.REGISTRY.is_wiring

    def test_file_names(self) -> None:
        assert ComponentKind.SERVICE.file_name("product") == "product_service.go"
        assert ComponentKind.PROVIDERS.file_name("product") == "providers.go"

    def test_resource_naming_convention(self) -> None:
        for kind in ComponentKind:
            assert kind.resource == f"{kind.value}.go.j2"


# ===========================================================================
# GenerationSpec
# ===========================================================================


class TestGenerationSpec:
    def test_from_request(self) -> None:
        spec = GenerationSpec.from_request("repo", "order_item", "sales", crud=True)
        assert spec.component_type is ComponentType.REPOSITORY
        assert spec.name == "order_item"
        assert spec.domain == "sales"
        assert spec.crud is True

    def test_missing_domain_checked_before_type(self) -> None:
        with pytest.raises(MissingDomainError):
            GenerationSpec.from_request("bogus", "product", "")

    def test_missing_name(self) -> None:
        with pytest.raises(MissingNameError):
            GenerationSpec.from_request("dto", "", "catalog")

    def test_unknown_type(self) -> None:
        with pytest.raises(UnknownTypeError):
            GenerationSpec.from_request("bogus", "product", "catalog")

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("c", ComponentType.CONTROLLER),
            ("repo", ComponentType.REPOSITORY),
            ("full", ComponentType.FULL),
            (ComponentType.DTO, ComponentType.DTO),
        ],
    )
    def test_direct_construction_resolves_aliases(self, value: object, expected: ComponentType) -> None:
        spec = GenerationSpec(component_type=value, name="product", domain="catalog")
        assert spec.component_type is expected

    def test_direct_construction_unknown_type(self) -> None:
        with pytest.raises(UnknownTypeError, match="bogus"):
            GenerationSpec(component_type="bogus", name="product", domain="catalog")

    def test_direct_construction_empty_domain(self) -> None:
        with pytest.raises(MissingDomainError):
            GenerationSpec(component_type="dto", name="product", domain="")

    def test_direct_construction_empty_name(self) -> None:
        with pytest.raises(MissingNameError):
            GenerationSpec(component_type="dto", name="", domain="catalog")

    def test_is_immutable(self) -> None:
        spec = GenerationSpec.from_request("dto", "product", "catalog")
        with pytest.raises(pydantic.ValidationError):
            spec.domain = "other"


# ===========================================================================
# FillData
# ===========================================================================


class TestFillData:
    def test_order_item(self) -> None:
        spec = GenerationSpec.from_request("full", "order_item", "sales", crud=True)
        data = FillData.from_spec(spec)
        assert data.package_name == "sales"
        assert data.domain == "sales"
        assert data.struct_name == "OrderItem"
        assert data.var_name == "orderItem"
        assert data.lower_name == "order_item"
        assert data.table_name == "order_items"
        assert data.has_crud is True
        assert data.module_path == DEFAULT_MODULE_PATH

    def test_product_table_name(self) -> None:
        data = FillData.from_spec(GenerationSpec.from_request("dto", "Product", "catalog"))
        assert data.table_name == "products"
        assert data.lower_name == "product"

    def test_lower_name_ignores_word_boundaries(self) -> None:
        data = FillData.from_spec(GenerationSpec.from_request("dto", "OrderItem", "sales"))
        assert data.lower_name == "orderitem"
        assert data.struct_name == "Orderitem"
        assert data.table_name == "order_items"

    def test_naive_pluralisation(self) -> None:
        data = FillData.from_spec(GenerationSpec.from_request("dto", "category", "catalog"))
        assert data.table_name == "categorys"

    def test_package_name_passed_through(self) -> None:
        data = FillData.from_spec(GenerationSpec.from_request("dto", "product", "Catalog-V2"))
        assert data.package_name == "Catalog-V2"

    def test_var_name_is_struct_name_with_first_char_lowered(self) -> None:
        data = FillData.from_spec(GenerationSpec.from_request("dto", "big blue-box", "shop"))
        assert data.var_name == data.struct_name[0].lower() + data.struct_name[1:]

    def test_module_path_override(self) -> None:
        spec = GenerationSpec.from_request("dto", "product", "catalog")
        data = FillData.from_spec(spec, module_path="github.com/acme/shop")
        assert data.context()["module_path"] == "github.com/acme/shop"

    def test_context_keys(self) -> None:
        data = FillData.from_spec(GenerationSpec.from_request("dto", "product", "catalog"))
        assert set(data.context()) == {
            "package_name",
            "struct_name",
            "var_name",
            "domain",
            "lower_name",
            "table_name",
            "has_crud",
            "module_path",
        }


class TestGeneratorSettings:
    def test_defaults(self) -> None:
        settings = GeneratorSettings()
        assert settings.output_root == "."
        assert settings.module_path is None
        assert settings.templates_dir is None

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            GeneratorSettings.model_validate({"outptu_root": "x"})
