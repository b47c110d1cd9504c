"""
Import resolution for one generation unit.

Collects every type mentioned in a unit and decides, per named type, whether
it may be written by its simple name (and imported) or must be written fully
qualified because another package already claimed that simple name.
"""

from typing import Dict, Iterable, Iterator, List, Set, Tuple

from ...logging_config import get_logger
from .types import NamedType, TypeRef

logger = get_logger(__name__)


class ImportRegistry:
    """
    Short-name claims for a single compilation unit.

    The first qualifier registered for a simple name owns it for the rest of
    the unit. Later types with the same simple name and another qualifier are
    rendered fully qualified. Create one registry per unit; it is not meant to
    be shared between units or threads.
    """

    def __init__(self, implicit_qualifiers: Iterable[str] = ()):
        """
        Initialize an empty registry.

        Args:
            implicit_qualifiers: Packages whose types are visible without an
                import declaration (e.g. ``java.lang`` or the unit's own package)
        """
        self.implicit_qualifiers: Set[str] = set(implicit_qualifiers)
        self._claims: Dict[str, str] = {}
        self._must_qualify: Dict[Tuple[str, str], None] = {}

    def register(self, ref: TypeRef) -> None:
        """Register a type and every type it contains."""
        for named_type in ref.named_types():
            self._register_named(named_type)

    def register_all(self, refs: Iterable[TypeRef]) -> None:
        for ref in refs:
            self.register(ref)

    def _register_named(self, named_type: NamedType) -> None:
        # Default-package types claim their name too but are never imported
        owner = self._claims.get(named_type.name)
        if owner is None:
            self._claims[named_type.name] = named_type.qualifier
        elif owner != named_type.qualifier:
            key = (named_type.qualifier, named_type.name)
            if key not in self._must_qualify:
                logger.debug(
                    "Simple name %s already claimed by %s; %s will be fully qualified",
                    named_type.name,
                    owner,
                    named_type.qualified_name,
                )
                self._must_qualify[key] = None

    def is_short(self, named_type: NamedType) -> bool:
        """
        Check whether a named type may be rendered by its simple name.

        Default-package types have no qualified form and are always short.
        """
        if not named_type.qualifier:
            return True
        return self._claims.get(named_type.name) == named_type.qualifier

    def import_lines(self) -> Iterator[Tuple[str, str]]:
        """
        Yield ``(qualifier, simple name)`` for every import declaration needed.

        Pairs come out in the order their names were first claimed, so
        identical input always produces identical import blocks.
        """
        for name, qualifier in self._claims.items():
            if not qualifier or qualifier in self.implicit_qualifiers:
                continue
            yield qualifier, name

    def conflicts(self) -> List[NamedType]:
        """Return the types that lost their simple name, in first-seen order."""
        return [NamedType(qualifier, name) for qualifier, name in self._must_qualify]

    def __contains__(self, named_type: NamedType) -> bool:
        return self._claims.get(named_type.name) == named_type.qualifier

    def __len__(self) -> int:
        return len(self._claims)

    def __repr__(self) -> str:
        return f"ImportRegistry(claims={len(self._claims)}, conflicts={len(self._must_qualify)})"
