"""
Build class models from JSON model documents.

A model document describes one class::

    {
        "name": "com.example.UserDao",
        "implements": ["java.io.Serializable"],
        "fields": [{"name": "connection", "type": "java.sql.Connection", "final": true}],
        "methods": [
            {
                "name": "find",
                "returns": {"type": "java.util.List", "args": ["com.example.User"]},
                "arguments": [{"name": "id", "type": "long"}],
                "throws": ["java.sql.SQLException"],
                "body": ["return null;"],
                "javadoc": "Looks up users by id."
            }
        ]
    }

Types are primitive keywords, qualified names (optionally suffixed with
``[]``), or objects with ``type`` and ``args`` for generic types.

Javadoc is a string or a list of strings, ``{"link": type}`` and
``{"method": "find"}`` fragments. A method link may name an overload by
its argument types, as in ``{"method": "find(long, java.lang.String)"}``.
"""

from typing import Any, Dict, List, Union

from ..logging_config import get_logger
from .core.naming import NamingCase, create_java_sanitizer
from .core.types import (
    ArrayType,
    NamedType,
    ParameterizedType,
    PrimitiveType,
    TypeRef,
    is_primitive_name,
    named,
)
from .model.class_model import ClassModel
from .model.field import FieldModel
from .model.javadoc import JavadocModel
from .model.method import MethodModel

logger = get_logger(__name__)


class ModelError(Exception):
    """Exception raised for malformed model documents."""

    pass


def type_from_spec(spec: Union[str, Dict[str, Any]]) -> TypeRef:
    """
    Convert a type description to a TypeRef.

    Args:
        spec: ``"int"``, ``"java.lang.String[]"`` or
            ``{"type": "java.util.Map", "args": ["java.lang.String", "int[]"]}``

    Returns:
        The corresponding type reference

    Raises:
        ModelError: If the description is not understood
    """
    if isinstance(spec, dict):
        if "type" not in spec:
            raise ModelError(f"Type object needs a 'type' key: {spec}")
        base = type_from_spec(spec["type"])
        args = spec.get("args") or []
        if not args:
            return base
        if not isinstance(base, NamedType):
            raise ModelError(f"Only named types take type arguments: {spec['type']}")
        return ParameterizedType(base, tuple(type_from_spec(arg) for arg in args))

    if not isinstance(spec, str):
        raise ModelError(f"Unsupported type description: {spec!r}")

    text = spec.strip()
    if text.endswith("[]"):
        return ArrayType(type_from_spec(text[:-2]))
    if not text or any(char in text for char in "<>, "):
        raise ModelError(
            f"Invalid type name {spec!r}; describe generic types as "
            '{"type": ..., "args": [...]}'
        )
    if is_primitive_name(text):
        return PrimitiveType(text)
    try:
        return named(text)
    except ValueError as e:
        raise ModelError(f"Invalid type name {spec!r}: {e}") from e


def _find_method(methods: List[MethodModel], reference: str) -> MethodModel:
    """
    Resolve ``"name"`` or ``"name(type, ...)"`` to a method of the class.

    A bare name picks the first method with that name; listing argument
    types selects an overload.
    """
    name, paren, rest = reference.partition("(")
    name = name.strip()
    if not paren:
        candidates = [method for method in methods if method.name == name]
    else:
        if not rest.endswith(")"):
            raise ModelError(f"Malformed method reference: {reference}")
        wanted = [type_from_spec(part) for part in rest[:-1].split(",") if part.strip()]
        candidates = [
            method for method in methods
            if method.name == name
            and [argument.type for argument in method.arguments] == wanted
        ]
    if not candidates:
        raise ModelError(f"Javadoc links to unknown method: {reference}")
    return candidates[0]


def _javadoc_from_spec(javadoc: JavadocModel, spec: Union[str, List[Any], None],
                       methods: List[MethodModel]) -> None:
    if not spec:
        return
    if isinstance(spec, str):
        for line in spec.splitlines():
            javadoc.add_text(f"{line}\n")
        return

    for piece in spec:
        if isinstance(piece, str):
            javadoc.add_text(piece)
        elif isinstance(piece, dict) and "link" in piece:
            javadoc.add_link(type_from_spec(piece["link"]))
        elif isinstance(piece, dict) and "method" in piece:
            javadoc.add_method_link(_find_method(methods, piece["method"]))
        else:
            raise ModelError(f"Unsupported Javadoc fragment: {piece!r}")


def _method_from_spec(spec: Dict[str, Any]) -> MethodModel:
    returns = spec.get("returns")
    method = MethodModel(
        spec["name"],
        None if returns in (None, "void") else type_from_spec(returns),
    )
    method.visibility = spec.get("visibility", method.visibility)

    arguments = [
        argument if isinstance(argument, dict) else {"type": argument}
        for argument in spec.get("arguments", [])
    ]

    # Reserve the generated names first so explicit names cannot collide with them
    sanitizer = create_java_sanitizer()
    for position, argument in enumerate(arguments):
        if not argument.get("name"):
            sanitizer.add_used_name(f"arg{position}")

    for argument in arguments:
        type_ref = type_from_spec(argument["type"])
        if argument.get("name"):
            method.create_argument(
                type_ref, sanitizer.sanitize_name(argument["name"], NamingCase.PRESERVE)
            )
        else:
            method.create_argument(type_ref)

    for exception in spec.get("throws", []):
        method.add_exception(type_from_spec(exception))

    body = spec.get("body", [])
    if isinstance(body, str):
        body = body.splitlines()
    for line in body:
        method.code.add_line(line)

    return method


def _field_from_spec(spec: Dict[str, Any]) -> FieldModel:
    return FieldModel(
        spec["name"],
        type_from_spec(spec["type"]),
        visibility=spec.get("visibility", "private"),
        static=spec.get("static", False),
        final=spec.get("final", False),
        initializer=spec.get("initializer"),
    )


def load_class_model(document: Dict[str, Any]) -> ClassModel:
    """
    Build a ClassModel from a model document.

    Args:
        document: Parsed JSON object describing one class

    Returns:
        The populated class model

    Raises:
        ModelError: If required keys are missing or values are malformed
    """
    if not isinstance(document, dict):
        raise ModelError("Model document must be a JSON object")

    try:
        name = document["name"]
        if document.get("package"):
            name = f"{document['package']}.{name}"
        class_model = ClassModel(name, kind=document.get("kind", "class"))

        if document.get("extends"):
            class_model.superclass = type_from_spec(document["extends"])
        for interface in document.get("implements", []):
            class_model.add_interface(type_from_spec(interface))

        field_specs = document.get("fields", [])
        for field_spec in field_specs:
            class_model.add_field(_field_from_spec(field_spec))

        method_specs = document.get("methods", [])
        for method_spec in method_specs:
            class_model.add_method(_method_from_spec(method_spec))
        methods = class_model.methods

        # Javadoc last, so links can point at any method of the class
        _javadoc_from_spec(class_model.javadoc, document.get("javadoc"), methods)
        for field, field_spec in zip(class_model.fields, field_specs):
            _javadoc_from_spec(field.javadoc, field_spec.get("javadoc"), methods)
        for method, method_spec in zip(class_model.methods, method_specs):
            _javadoc_from_spec(method.javadoc, method_spec.get("javadoc"), methods)

    except KeyError as e:
        raise ModelError(f"Missing required key: {e}") from e
    except (TypeError, ValueError) as e:
        raise ModelError(f"Invalid model document: {e}") from e

    logger.debug(
        "Loaded %s with %d field(s) and %d method(s)",
        class_model.name.qualified_name,
        len(class_model.fields),
        len(class_model.methods),
    )
    return class_model


def load_class_models(
    document: Union[Dict[str, Any], List[Dict[str, Any]]]
) -> List[ClassModel]:
    """Load one model or a list of models."""
    if isinstance(document, list):
        return [load_class_model(item) for item in document]
    return [load_class_model(document)]
