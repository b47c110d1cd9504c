"""
Class model: the aggregate rendered as one Java compilation unit.
"""

import io
from typing import List, Optional

from ...logging_config import get_logger
from ..core.config import GeneratorConfig
from ..core.imports import ImportRegistry
from ..core.templates import render_unit_header
from ..core.types import NamedType, TypeRef, named
from ..core.writer import CodeWriter, StreamCodeWriter
from .field import FieldModel
from .javadoc import JavadocModel
from .method import MethodModel

logger = get_logger(__name__)


class ClassModel:
    """A generated class or interface with its fields and methods."""

    def __init__(self, name, kind: str = "class"):
        """
        Initialize the class.

        Args:
            name: NamedType or qualified name such as ``com.example.Foo``
            kind: ``class`` or ``interface``
        """
        if kind not in ("class", "interface"):
            raise ValueError(f"Unsupported kind: {kind}")
        self.name: NamedType = named(name) if isinstance(name, str) else name
        self.kind = kind
        self.visibility = "public"
        self.superclass: Optional[TypeRef] = None
        self.interfaces: List[TypeRef] = []
        self.fields: List[FieldModel] = []
        self.methods: List[MethodModel] = []
        self.javadoc = JavadocModel()

    @property
    def package(self) -> str:
        return self.name.qualifier

    def add_interface(self, interface: TypeRef) -> None:
        self.interfaces.append(interface)

    def add_field(self, field: FieldModel) -> FieldModel:
        self.fields.append(field)
        return field

    def add_method(self, method: MethodModel) -> MethodModel:
        method.class_model = self
        self.methods.append(method)
        return method

    def create_method(self, name: str, return_type: Optional[TypeRef] = None) -> MethodModel:
        return self.add_method(MethodModel(name, return_type))

    def collect_imports(self, imports: ImportRegistry) -> None:
        """Register the class name first so it always keeps its simple name."""
        imports.register(self.name)
        if self.superclass is not None:
            imports.register(self.superclass)
        imports.register_all(self.interfaces)
        for field in self.fields:
            field.collect_imports(imports)
        for method in self.methods:
            method.collect_imports(imports)
        self.javadoc.collect_imports(imports)

    def create_registry(self, config: Optional[GeneratorConfig] = None) -> ImportRegistry:
        """Build and fill a fresh registry for this unit."""
        config = config or GeneratorConfig()
        implicit = list(config.implicit_packages)
        if self.package:
            implicit.append(self.package)
        imports = ImportRegistry(implicit)
        self.collect_imports(imports)
        return imports

    def _declaration(self, imports: Optional[ImportRegistry]) -> str:
        parts = [f"{self.visibility} {self.kind} {self.name.render(imports)}"]
        if self.kind == "class" and self.superclass is not None:
            parts.append(f"extends {self.superclass.render(imports)}")
        if self.interfaces:
            # Interfaces extend their super-interfaces
            parts.append("implements" if self.kind == "class" else "extends")
            parts.append(", ".join(interface.render(imports) for interface in self.interfaces))
        return " ".join(parts)

    def generate(self, out: CodeWriter, imports: Optional[ImportRegistry],
                 add_comments: bool = True) -> None:
        """Write the class declaration and its members."""
        if add_comments:
            self.javadoc.generate(out, imports)
        out.writeln(f"{self._declaration(imports)} {{")

        body = out.indented()
        for field in self.fields:
            field.generate(body, imports, with_javadoc=add_comments,
                           in_interface=self.kind == "interface")

        for index, method in enumerate(self.methods):
            if index or self.fields:
                out.writeln()
            if self.kind == "interface":
                method.generate_declaration(body, imports, with_javadoc=add_comments)
            else:
                method.generate(body, imports, with_javadoc=add_comments)
        out.writeln("}")

    def generate_source(self, config: Optional[GeneratorConfig] = None) -> str:
        """
        Render the complete compilation unit.

        Returns:
            Package declaration, imports and class body as one string
        """
        config = config or GeneratorConfig()
        imports = self.create_registry(config)

        import_lines = list(imports.import_lines())
        logger.debug(
            "Generating %s with %d import(s) and %d collision(s)",
            self.name.qualified_name,
            len(import_lines),
            len(imports.conflicts()),
        )

        header = render_unit_header(self.package, import_lines, config.line_ending)

        buffer = io.StringIO()
        out = StreamCodeWriter.from_config(config, buffer)
        self.generate(out, imports, add_comments=config.add_comments)
        return header + buffer.getvalue()

    def __repr__(self) -> str:
        return f"ClassModel(name={self.name.qualified_name!r}, kind={self.kind!r})"

