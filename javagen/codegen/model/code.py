"""Method bodies as sequences of renderable fragments."""

from typing import List, Optional

from ..core.imports import ImportRegistry
from ..core.types import TypeRef
from ..core.writer import CodeWriter


class _Text:
    def __init__(self, text: str):
        self.text = text

    def collect_imports(self, imports: ImportRegistry) -> None:
        pass

    def generate(self, out: CodeWriter, imports: Optional[ImportRegistry]) -> None:
        out.write(self.text)


class _TypeReference:
    def __init__(self, type_ref: TypeRef):
        self.type_ref = type_ref

    def collect_imports(self, imports: ImportRegistry) -> None:
        imports.register(self.type_ref)

    def generate(self, out: CodeWriter, imports: Optional[ImportRegistry]) -> None:
        out.write(self.type_ref.render(imports))


class _Block:
    def __init__(self, header: str, code: "CodeModel"):
        self.header = header
        self.code = code

    def collect_imports(self, imports: ImportRegistry) -> None:
        self.code.collect_imports(imports)

    def generate(self, out: CodeWriter, imports: Optional[ImportRegistry]) -> None:
        out.writeln(f"{self.header} {{")
        body = out.indented()
        self.code.generate(body, imports)
        body.end_line()
        out.writeln("}")


class CodeModel:
    """
    Ordered body fragments.

    Text is written as-is (a trailing ``\\n`` ends the line), type references
    are rendered through the import registry, and blocks open a nested,
    indented scope.
    """

    def __init__(self):
        self._fragments: List = []

    def add_text(self, text: str) -> "CodeModel":
        self._fragments.append(_Text(text))
        return self

    def add_line(self, text: str = "") -> "CodeModel":
        return self.add_text(f"{text}\n")

    def add_type(self, type_ref: TypeRef) -> "CodeModel":
        self._fragments.append(_TypeReference(type_ref))
        return self

    def add_block(self, header: str) -> "CodeModel":
        """Append ``header {`` ... ``}`` and return the model for the block's body."""
        inner = CodeModel()
        self._fragments.append(_Block(header, inner))
        return inner

    def is_empty(self) -> bool:
        return not self._fragments

    def collect_imports(self, imports: ImportRegistry) -> None:
        for fragment in self._fragments:
            fragment.collect_imports(imports)

    def generate(self, out: CodeWriter, imports: Optional[ImportRegistry]) -> None:
        for fragment in self._fragments:
            fragment.generate(out, imports)
