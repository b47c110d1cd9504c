"""Tests for building class models from JSON documents."""

import pytest

from javagen.codegen.core.types import (
    ArrayType,
    NamedType,
    ParameterizedType,
    PrimitiveType,
    named,
)
from javagen.codegen.loader import (
    ModelError,
    load_class_model,
    load_class_models,
    type_from_spec,
)


@pytest.fixture
def document():
    return {
        "package": "com.example",
        "name": "UserDao",
        "implements": ["java.io.Serializable"],
        "javadoc": ["Use ", {"method": "find"}, " to look users up.\n"],
        "fields": [
            {"name": "connection", "type": "java.sql.Connection", "final": True,
             "javadoc": "Underlying connection."},
        ],
        "methods": [
            {
                "name": "find",
                "returns": {"type": "java.util.List", "args": ["com.example.User"]},
                "arguments": [{"name": "user_id", "type": "long"}, "java.lang.String"],
                "throws": ["java.sql.SQLException"],
                "body": ["return null;"],
                "javadoc": "Finds users.",
            },
            {"name": "close", "returns": "void", "body": "connection.close();"},
        ],
    }


class TestTypeFromSpec:
    """Tests for type descriptions."""

    def test_primitive(self):
        assert type_from_spec("int") == PrimitiveType("int")

    def test_named(self):
        assert type_from_spec("java.sql.Connection") == NamedType("java.sql", "Connection")

    def test_array(self):
        assert type_from_spec("byte[][]") == ArrayType(ArrayType(PrimitiveType("byte")))

    def test_parameterized(self):
        ref = type_from_spec({"type": "java.util.Map", "args": ["java.lang.String", "int[]"]})
        assert ref == ParameterizedType(
            named("java.util.Map"),
            (named("java.lang.String"), ArrayType(PrimitiveType("int"))),
        )

    def test_object_without_args(self):
        assert type_from_spec({"type": "java.util.List"}) == named("java.util.List")

    def test_generic_string_rejected(self):
        with pytest.raises(ModelError, match="generic"):
            type_from_spec("java.util.List<String>")

    def test_primitive_with_args_rejected(self):
        with pytest.raises(ModelError):
            type_from_spec({"type": "int", "args": ["long"]})

    def test_missing_type_key(self):
        with pytest.raises(ModelError):
            type_from_spec({"args": ["int"]})

    def test_empty_simple_name(self):
        with pytest.raises(ModelError):
            type_from_spec("java.util.")

    def test_non_string(self):
        with pytest.raises(ModelError):
            type_from_spec(42)


class TestLoadClassModel:
    """Tests for whole documents."""

    def test_class_name_and_package(self, document):
        model = load_class_model(document)
        assert model.name == NamedType("com.example", "UserDao")
        assert model.interfaces == [named("java.io.Serializable")]

    def test_argument_names(self, document):
        find = load_class_model(document).methods[0]
        assert [argument.name for argument in find.arguments] == ["user_id", "arg1"]

    def test_argument_names_keep_their_spelling(self):
        model = load_class_model({
            "name": "Fetcher",
            "methods": [{
                "name": "fetch",
                "arguments": [
                    {"name": "URL", "type": "java.net.URL"},
                    {"name": "user_id", "type": "long"},
                    {"name": "max-size", "type": "int"},
                ],
                "body": ["open(URL, user_id, max_size);"],
            }],
        })
        source = model.generate_source()
        assert "    public void fetch(URL URL, long user_id, int max_size) {\n" in source

    def test_duplicate_argument_names_get_counter(self):
        model = load_class_model({
            "name": "Foo",
            "methods": [{"name": "put", "arguments": [
                {"name": "key", "type": "int"}, {"name": "key", "type": "int"},
            ]}],
        })
        assert [argument.name for argument in model.methods[0].arguments] == ["key", "key1"]

    def test_void_return(self, document):
        close = load_class_model(document).methods[1]
        assert close.return_type is None

    def test_reserved_argument_name(self):
        model = load_class_model({
            "name": "Foo",
            "methods": [{"name": "of", "arguments": [{"name": "class", "type": "java.lang.Class"}]}],
        })
        assert model.methods[0].arguments[0].name == "class_"

    def test_explicit_name_cannot_take_generated_name(self):
        model = load_class_model({
            "name": "Foo",
            "methods": [{"name": "put", "arguments": ["int", {"name": "arg0", "type": "int"}]}],
        })
        names = [argument.name for argument in model.methods[0].arguments]
        assert names == ["arg0", "arg01"]

    def test_generates_expected_source(self, document):
        source = load_class_model(document).generate_source()
        assert "import java.sql.Connection;\n" in source
        assert " * Use {@link UserDao#find(long, String)} to look users up.\n" in source
        assert "    /**\n     * Underlying connection.\n     */\n" in source
        assert "    public List<User> find(long user_id, String arg1) throws SQLException {\n" in source
        assert "    public void close() {\n        connection.close();\n    }\n" in source

    def test_unknown_method_link(self):
        with pytest.raises(ModelError, match="unknown method"):
            load_class_model({"name": "Foo", "javadoc": [{"method": "missing"}]})

    def test_missing_name(self):
        with pytest.raises(ModelError, match="Missing required key"):
            load_class_model({"methods": []})

    def test_missing_method_name(self):
        with pytest.raises(ModelError):
            load_class_model({"name": "Foo", "methods": [{"returns": "int"}]})

    def test_invalid_kind(self):
        with pytest.raises(ModelError):
            load_class_model({"name": "Foo", "kind": "record"})

    def test_not_an_object(self):
        with pytest.raises(ModelError):
            load_class_model(["Foo"])

    def test_load_list(self, document):
        models = load_class_models([document, {"name": "com.example.Other"}])
        assert [model.name.name for model in models] == ["UserDao", "Other"]

    def test_method_link_selects_overload(self):
        model = load_class_model({
            "name": "com.example.Finder",
            "javadoc": ["See ", {"method": "find(java.lang.String)"}, ".\n"],
            "methods": [
                {"name": "find", "arguments": [{"name": "id", "type": "long"}]},
                {"name": "find", "arguments": [{"name": "email", "type": "java.lang.String"}]},
            ],
        })
        assert " * See {@link Finder#find(String)}.\n" in model.generate_source()

    def test_bare_method_link_picks_first_overload(self):
        model = load_class_model({
            "name": "Finder",
            "javadoc": [{"method": "find"}],
            "methods": [
                {"name": "find", "arguments": ["long"]},
                {"name": "find", "arguments": ["int"]},
            ],
        })
        assert " * {@link Finder#find(long)}\n" in model.generate_source()

    def test_method_link_without_matching_overload(self):
        with pytest.raises(ModelError, match="unknown method"):
            load_class_model({
                "name": "Finder",
                "javadoc": [{"method": "find(int)"}],
                "methods": [{"name": "find", "arguments": ["long"]}],
            })
