"""
Entry point for generating one compilation unit.

Wraps class rendering with validation warnings, metadata and error capture.
"""

from typing import Dict, List, Any, Optional, TYPE_CHECKING

from ...logging_config import get_logger
from .config import GeneratorConfig

if TYPE_CHECKING:
    from ..model.class_model import ClassModel

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def validate_class(class_model: "ClassModel", config: Optional[GeneratorConfig] = None) -> List[str]:
    """
    Check a class for problems the renderer does not guard against.

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    for method in class_model.methods:
        seen = set()
        for argument in method.arguments:
            if argument.name in seen:
                warnings.append(
                    f"Duplicate argument name '{argument.name}' in "
                    f"{class_model.name.name}.{method.name}"
                )
            seen.add(argument.name)

    if class_model.kind == "interface":
        for field in class_model.fields:
            if field.initializer is None:
                warnings.append(
                    f"Interface constant {class_model.name.name}.{field.name} has no initializer"
                )

    imports = class_model.create_registry(config)
    for conflict in imports.conflicts():
        if not conflict.qualifier:
            # No qualified form to fall back on
            warnings.append(
                f"Default-package type {conflict.name} is shadowed by another "
                f"type with the same simple name"
            )
            continue
        warnings.append(
            f"{conflict.qualified_name} is written fully qualified "
            f"(simple name {conflict.name} is already imported)"
        )

    return warnings


def generate_unit(
    class_model: "ClassModel", config: Optional[GeneratorConfig] = None
) -> GenerationResult:
    """
    Generate a compilation unit with error handling.

    Args:
        class_model: Class to render
        config: Generation settings (defaults when omitted)

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    config = config or GeneratorConfig()
    try:
        warnings = validate_class(class_model, config)
        code = class_model.generate_source(config)

        imports = class_model.create_registry(config)
        metadata = {
            "class_name": class_model.name.qualified_name,
            "kind": class_model.kind,
            "file_name": f"{class_model.name.name}.java",
            "method_count": len(class_model.methods),
            "field_count": len(class_model.fields),
            "import_count": len(list(imports.import_lines())),
            "has_conflicts": bool(imports.conflicts()),
        }

        logger.info(
            "Generated %s (%d methods, %d warnings)",
            metadata["class_name"],
            metadata["method_count"],
            len(warnings),
        )
        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed for %s: %s", class_model.name, e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
