"""
Java type references for code generation.

Immutable descriptions of the types that appear in signatures, bodies and
documentation links. Rendering consults an ImportRegistry to decide between
the short and the fully qualified spelling of every named type.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .imports import ImportRegistry


JAVA_PRIMITIVES = frozenset(
    {"boolean", "byte", "char", "short", "int", "long", "float", "double", "void"}
)


@dataclass(frozen=True)
class PrimitiveType:
    """A built-in type such as ``int`` or ``boolean``."""

    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Primitive type name must not be empty")

    def named_types(self) -> Iterator["NamedType"]:
        return iter(())

    def render(self, registry: Optional["ImportRegistry"] = None) -> str:
        return self.name


@dataclass(frozen=True)
class NamedType:
    """
    A class or interface, identified by qualifier (package) and simple name.

    The qualifier may be empty for built-ins; such types always render by
    their simple name and never take part in import resolution.
    """

    qualifier: str
    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError(f"Simple name must not be empty (qualifier={self.qualifier!r})")

    @property
    def qualified_name(self) -> str:
        if not self.qualifier:
            return self.name
        return f"{self.qualifier}.{self.name}"

    def named_types(self) -> Iterator["NamedType"]:
        yield self

    def render(self, registry: Optional["ImportRegistry"] = None) -> str:
        if not self.qualifier:
            return self.name
        if registry is not None and registry.is_short(self):
            return self.name
        return self.qualified_name

    def __str__(self) -> str:
        return self.qualified_name


@dataclass(frozen=True)
class ArrayType:
    """An array of another type."""

    component: "TypeRef"

    def named_types(self) -> Iterator[NamedType]:
        yield from self.component.named_types()

    def render(self, registry: Optional["ImportRegistry"] = None) -> str:
        return f"{self.component.render(registry)}[]"


@dataclass(frozen=True)
class ParameterizedType:
    """A generic type applied to type arguments, e.g. ``List<String>``."""

    base: NamedType
    arguments: Tuple["TypeRef", ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence but store a tuple so the value stays hashable
        object.__setattr__(self, "arguments", tuple(self.arguments))

    def named_types(self) -> Iterator[NamedType]:
        yield self.base
        for argument in self.arguments:
            yield from argument.named_types()

    def render(self, registry: Optional["ImportRegistry"] = None) -> str:
        rendered = ", ".join(argument.render(registry) for argument in self.arguments)
        return f"{self.base.render(registry)}<{rendered}>"


TypeRef = Union[PrimitiveType, NamedType, ArrayType, ParameterizedType]


def render(ref: TypeRef, registry: Optional["ImportRegistry"] = None) -> str:
    """
    Render a type reference as Java source text.

    Args:
        ref: Type to render
        registry: Import registry of the current unit; without one every
            named type renders fully qualified

    Returns:
        The short or fully qualified spelling of the type
    """
    return ref.render(registry)


# Factory helpers


def primitive(name: str) -> PrimitiveType:
    """Create a primitive type reference."""
    return PrimitiveType(name)


def named(qualified_name: str) -> NamedType:
    """
    Create a named type from its qualified name.

    The qualifier is everything before the last dot: ``named("java.sql.Connection")``
    gives qualifier ``java.sql`` and simple name ``Connection``.
    """
    qualifier, _, name = qualified_name.rpartition(".")
    return NamedType(qualifier, name)


def array_of(component: TypeRef) -> ArrayType:
    """Create an array type reference."""
    return ArrayType(component)


def parameterized(base: Union[NamedType, str], *arguments: TypeRef) -> ParameterizedType:
    """Create a generic type reference such as ``Map<String, Object>``."""
    if isinstance(base, str):
        base = named(base)
    return ParameterizedType(base, arguments)


def is_primitive_name(name: str) -> bool:
    """Check whether a name is one of the Java primitive keywords."""
    return name in JAVA_PRIMITIVES
