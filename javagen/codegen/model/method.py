"""
Method model: signature, body and Javadoc of one generated method.
"""

from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

from ..core.imports import ImportRegistry
from ..core.types import TypeRef
from ..core.writer import CodeWriter
from .code import CodeModel
from .javadoc import JavadocModel

if TYPE_CHECKING:
    from .class_model import ClassModel


@dataclass
class Argument:
    """A named, typed method parameter."""

    name: str
    type: TypeRef


class MethodModel:
    """
    A method of a generated class.

    Argument names must be unique within the method. Arguments created
    without a name are called ``arg<N>`` after their zero-based position,
    which keeps them unique as long as explicit names avoid that pattern.
    """

    def __init__(self, name: str, return_type: Optional[TypeRef] = None):
        self.name = name
        self.return_type = return_type
        self.visibility = "public"
        self.arguments: List[Argument] = []
        self.exceptions: List[TypeRef] = []
        self.code = CodeModel()
        self.javadoc = JavadocModel()
        self.class_model: Optional["ClassModel"] = None

    def create_argument(self, type_ref: TypeRef, name: Optional[str] = None) -> Argument:
        """Append an argument, naming it ``arg<N>`` when no name is given."""
        if name is None:
            name = f"arg{len(self.arguments)}"
        argument = Argument(name, type_ref)
        self.arguments.append(argument)
        return argument

    def add_exception(self, exception: TypeRef) -> None:
        """Append a thrown type; order is kept and duplicates are not removed."""
        self.exceptions.append(exception)

    def collect_imports(self, imports: ImportRegistry) -> None:
        """Register types in visit order: return, arguments, exceptions, body, Javadoc."""
        if self.return_type is not None:
            imports.register(self.return_type)
        for argument in self.arguments:
            imports.register(argument.type)
        for exception in self.exceptions:
            imports.register(exception)
        self.code.collect_imports(imports)
        self.javadoc.collect_imports(imports)

    def signature(self, imports: Optional[ImportRegistry]) -> str:
        """Return the declaration up to, but excluding, the body."""
        return_type = "void" if self.return_type is None else self.return_type.render(imports)
        arguments = ", ".join(
            f"{argument.type.render(imports)} {argument.name}" for argument in self.arguments
        )
        parts = [f"{self.visibility} " if self.visibility else ""]
        parts.append(f"{return_type} {self.name}({arguments})")
        if self.exceptions:
            parts.append(" throws ")
            parts.append(", ".join(exception.render(imports) for exception in self.exceptions))
        return "".join(parts)

    def generate(self, out: CodeWriter, imports: Optional[ImportRegistry],
                 with_javadoc: bool = True) -> None:
        """Write Javadoc, signature and brace-delimited body."""
        if with_javadoc:
            self.javadoc.generate(out, imports)
        out.write(self.signature(imports))
        out.writeln(" {")
        body = out.indented()
        self.code.generate(body, imports)
        body.end_line()
        out.writeln("}")

    def generate_declaration(self, out: CodeWriter, imports: Optional[ImportRegistry],
                             with_javadoc: bool = True) -> None:
        """Write Javadoc and a body-less declaration, as used in interfaces."""
        if with_javadoc:
            self.javadoc.generate(out, imports)
        out.writeln(f"{self.signature(imports)};")

    def __repr__(self) -> str:
        return f"MethodModel(name={self.name!r}, arguments={len(self.arguments)})"
