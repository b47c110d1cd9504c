"""Field declarations of a generated class."""

from typing import Optional

from ..core.imports import ImportRegistry
from ..core.types import TypeRef
from ..core.writer import CodeWriter
from .javadoc import JavadocModel


class FieldModel:
    """A field such as ``private final Connection delegate;``."""

    def __init__(
        self,
        name: str,
        type_ref: TypeRef,
        visibility: str = "private",
        static: bool = False,
        final: bool = False,
        initializer: Optional[str] = None,
    ):
        self.name = name
        self.type = type_ref
        self.visibility = visibility
        self.static = static
        self.final = final
        self.initializer = initializer
        self.javadoc = JavadocModel()

    def collect_imports(self, imports: ImportRegistry) -> None:
        imports.register(self.type)
        self.javadoc.collect_imports(imports)

    def generate(self, out: CodeWriter, imports: Optional[ImportRegistry],
                 with_javadoc: bool = True, in_interface: bool = False) -> None:
        """
        Write the declaration.

        Interface fields are implicitly ``public static final``, so no
        modifiers are written for them.
        """
        if with_javadoc:
            self.javadoc.generate(out, imports)
        modifiers = []
        if not in_interface:
            if self.visibility:
                modifiers.append(self.visibility)
            if self.static:
                modifiers.append("static")
            if self.final:
                modifiers.append("final")
        modifiers.append(self.type.render(imports))
        modifiers.append(self.name)
        declaration = " ".join(modifiers)
        if self.initializer is not None:
            declaration = f"{declaration} = {self.initializer}"
        out.writeln(f"{declaration};")
