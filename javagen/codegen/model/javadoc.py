"""
Javadoc comments built from text and cross-reference fragments.

Links to classes and methods are rendered through the same import registry
as the surrounding code, so ``{@link ...}`` targets use the short name
whenever the unit imports the type.
"""

from typing import List, Optional, TYPE_CHECKING

from ..core.imports import ImportRegistry
from ..core.types import TypeRef
from ..core.writer import CodeWriter

if TYPE_CHECKING:
    from .method import MethodModel


class JavadocWriter:
    """Writes the ``/** ... */`` frame and the `` * `` prefix of every line."""

    def __init__(self, out: CodeWriter):
        self.out = out
        self._line_open = False
        out.writeln("/**")

    def write(self, text: str) -> None:
        *lines, last = text.split("\n")
        for line in lines:
            self.writeln(line)
        if last:
            if not self._line_open:
                self.out.write(" * ")
                self._line_open = True
            self.out.write(last)

    def writeln(self, text: str = "") -> None:
        self.write(text)
        if not self._line_open:
            # Empty comment lines get no trailing blank
            self.out.write(" *")
        self.out.writeln()
        self._line_open = False

    def end(self) -> None:
        if self._line_open:
            self.out.writeln()
            self._line_open = False
        self.out.writeln(" */")


class _TextPiece:
    def __init__(self, text: str):
        self.text = text

    def collect_imports(self, imports: ImportRegistry) -> None:
        pass

    def generate(self, out: JavadocWriter, imports: Optional[ImportRegistry]) -> None:
        if self.text.endswith("\n"):
            out.writeln(self.text[:-1])
        else:
            out.write(self.text)


class _ClassLink:
    def __init__(self, type_ref: TypeRef):
        self.type_ref = type_ref

    def collect_imports(self, imports: ImportRegistry) -> None:
        imports.register(self.type_ref)

    def generate(self, out: JavadocWriter, imports: Optional[ImportRegistry]) -> None:
        out.write(f"{{@link {self.type_ref.render(imports)}}}")


class _MethodLink:
    def __init__(self, method: "MethodModel", owner: Optional[TypeRef] = None):
        self.method = method
        self._owner = owner

    @property
    def owner(self) -> Optional[TypeRef]:
        if self._owner is not None:
            return self._owner
        if self.method.class_model is not None:
            return self.method.class_model.name
        return None

    def collect_imports(self, imports: ImportRegistry) -> None:
        if self.owner is not None:
            imports.register(self.owner)
        for argument in self.method.arguments:
            imports.register(argument.type)

    def generate(self, out: JavadocWriter, imports: Optional[ImportRegistry]) -> None:
        owner = self.owner.render(imports) if self.owner is not None else ""
        argument_types = ", ".join(
            argument.type.render(imports) for argument in self.method.arguments
        )
        out.write(f"{{@link {owner}#{self.method.name}({argument_types})}}")


class JavadocModel:
    """Ordered Javadoc fragments; an empty model renders nothing."""

    def __init__(self):
        self._pieces: List = []

    def add_text(self, text: str) -> "JavadocModel":
        self._pieces.append(_TextPiece(text))
        return self

    def add_link(self, type_ref: TypeRef) -> "JavadocModel":
        """Append a ``{@link Type}`` reference."""
        self._pieces.append(_ClassLink(type_ref))
        return self

    def add_method_link(
        self, method: "MethodModel", owner: Optional[TypeRef] = None
    ) -> "JavadocModel":
        """
        Append a ``{@link Owner#method(ArgType, ...)}`` reference.

        Without an explicit owner the method's class is used; a method that
        belongs to no class renders as ``#method(...)``.
        """
        self._pieces.append(_MethodLink(method, owner))
        return self

    def is_empty(self) -> bool:
        return not self._pieces

    def collect_imports(self, imports: ImportRegistry) -> None:
        for piece in self._pieces:
            piece.collect_imports(imports)

    def generate(self, out: CodeWriter, imports: Optional[ImportRegistry]) -> None:
        if not self._pieces:
            return
        writer = JavadocWriter(out)
        for piece in self._pieces:
            piece.generate(writer, imports)
        writer.end()
