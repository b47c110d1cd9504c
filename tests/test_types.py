"""Tests for type references and their rendering."""

import pytest

from javagen.codegen.core.imports import ImportRegistry
from javagen.codegen.core.types import (
    ArrayType,
    NamedType,
    ParameterizedType,
    PrimitiveType,
    array_of,
    named,
    parameterized,
    primitive,
    render,
)


class TestNamedType:
    """Tests for qualified names."""

    def test_named_splits_on_last_dot(self):
        ref = named("java.sql.Connection")
        assert ref.qualifier == "java.sql"
        assert ref.name == "Connection"

    def test_named_without_package(self):
        ref = named("int")
        assert ref == NamedType("", "int")

    def test_qualified_name(self):
        assert NamedType("java.util", "List").qualified_name == "java.util.List"
        assert NamedType("", "int").qualified_name == "int"

    def test_empty_simple_name_rejected(self):
        with pytest.raises(ValueError):
            NamedType("java.util", "")

    def test_is_immutable(self):
        ref = named("java.util.List")
        with pytest.raises(AttributeError):
            ref.name = "Set"

    def test_hashable(self):
        assert {named("a.Foo"), named("a.Foo")} == {NamedType("a", "Foo")}


class TestRender:
    """Tests for short and fully qualified rendering."""

    def test_unregistered_type_renders_qualified(self):
        assert render(named("java.util.List"), ImportRegistry()) == "java.util.List"

    def test_no_registry_renders_qualified(self):
        assert render(named("java.util.List")) == "java.util.List"

    def test_registered_type_renders_short(self):
        registry = ImportRegistry()
        registry.register(named("java.util.List"))
        assert render(named("java.util.List"), registry) == "List"

    def test_unqualified_named_renders_simple(self):
        assert render(NamedType("", "int"), None) == "int"

    def test_primitive(self):
        assert render(primitive("boolean")) == "boolean"

    def test_primitive_empty_rejected(self):
        with pytest.raises(ValueError):
            PrimitiveType("")

    def test_array(self):
        registry = ImportRegistry()
        ref = array_of(named("java.lang.String"))
        registry.register(ref)
        assert render(ref, registry) == "String[]"
        assert render(array_of(array_of(primitive("byte")))) == "byte[][]"

    def test_parameterized_arguments_decided_independently(self):
        registry = ImportRegistry()
        registry.register(named("a.Foo"))
        ref = parameterized("java.util.Map", named("a.Foo"), named("b.Foo"))
        registry.register(ref)
        assert render(ref, registry) == "Map<Foo, b.Foo>"

    def test_parameterized_stores_tuple(self):
        ref = ParameterizedType(named("java.util.List"), [named("a.Foo")])
        assert ref.arguments == (named("a.Foo"),)
        assert hash(ref) == hash(parameterized("java.util.List", named("a.Foo")))

    def test_named_types_walks_nested_types(self):
        ref = parameterized(
            "java.util.Map",
            named("java.lang.String"),
            ArrayType(parameterized("java.util.List", named("a.Foo"))),
        )
        assert list(ref.named_types()) == [
            named("java.util.Map"),
            named("java.lang.String"),
            named("java.util.List"),
            named("a.Foo"),
        ]
