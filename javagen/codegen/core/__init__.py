"""
Core code generation components.

Type references, import resolution, code writers, configuration and the
unit generation entry point used by every model class.
"""

from .types import (
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
)
from .imports import ImportRegistry
from .writer import CodeWriter, StreamCodeWriter, IndentCodeWriter
from .naming import NameSanitizer, NamingCase, create_java_sanitizer
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine
from .generator import GeneratorError, GenerationResult, generate_unit, validate_class

__all__ = [
    # Type references
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
    # Import resolution
    "ImportRegistry",
    # Writers
    "CodeWriter",
    "StreamCodeWriter",
    "IndentCodeWriter",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    "create_java_sanitizer",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    # Generation entry point
    "GeneratorError",
    "GenerationResult",
    "generate_unit",
    "validate_class",
]
