"""
javagen code generation module.

Builds Java compilation units from an in-memory model of classes, methods,
fields, types and Javadoc comments.
"""

import json

from .core import (
    TypeRef,
    PrimitiveType,
    NamedType,
    ArrayType,
    ParameterizedType,
    render,
    primitive,
    named,
    array_of,
    parameterized,
    ImportRegistry,
    CodeWriter,
    StreamCodeWriter,
    IndentCodeWriter,
    GeneratorConfig,
    ConfigError,
    load_config,
    GeneratorError,
    GenerationResult,
    generate_unit,
)
from .model import (
    CodeModel,
    JavadocModel,
    Argument,
    MethodModel,
    FieldModel,
    ClassModel,
)
from .loader import ModelError, load_class_model, load_class_models, type_from_spec


# Convenience functions
def generate_from_document(document, config=None):
    """
    Generate Java sources from a model document.

    Args:
        document: Parsed JSON model (one class or a list of classes)
        config: GeneratorConfig, dict of overrides, or None for defaults

    Returns:
        List of GenerationResult, one per class
    """
    if not isinstance(config, GeneratorConfig):
        config = load_config(config)
    return [generate_unit(class_model, config) for class_model in load_class_models(document)]


def quick_generate(document, **options):
    """
    Quick code generation from a single-class model document.

    Args:
        document: Model document (dict or JSON string)
        **options: Generator options

    Returns:
        Generated code string
    """
    if isinstance(document, str):
        document = json.loads(document)

    result = generate_unit(load_class_model(document), load_config(options))

    if result.success:
        return result.code
    else:
        raise GeneratorError(result.error_message) from result.exception


__all__ = [
    "TypeRef",
    "PrimitiveType",
    "NamedType",
    "ArrayType",
    "ParameterizedType",
    "render",
    "primitive",
    "named",
    "array_of",
    "parameterized",
    "ImportRegistry",
    "CodeWriter",
    "StreamCodeWriter",
    "IndentCodeWriter",
    "GeneratorConfig",
    "ConfigError",
    "load_config",
    "GeneratorError",
    "GenerationResult",
    "generate_unit",
    "CodeModel",
    "JavadocModel",
    "Argument",
    "MethodModel",
    "FieldModel",
    "ClassModel",
    "ModelError",
    "load_class_model",
    "load_class_models",
    "type_from_spec",
    "generate_from_document",
    "quick_generate",
]
