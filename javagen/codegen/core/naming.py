"""
Naming utilities for safe code generation.

Handles name sanitization, case conversions and keyword conflicts
for identifiers that end up in generated Java source.
"""

import re
from typing import Set, Dict
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""
    CAMEL_CASE = "camel"      # userName
    PASCAL_CASE = "pascal"    # UserName
    PRESERVE = "preserve"     # keep the caller's spelling


# Java reserved words and literals
JAVA_RESERVED_WORDS = {
    'abstract', 'assert', 'boolean', 'break', 'byte', 'case', 'catch', 'char',
    'class', 'const', 'continue', 'default', 'do', 'double', 'else', 'enum',
    'extends', 'final', 'finally', 'float', 'for', 'goto', 'if', 'implements',
    'import', 'instanceof', 'int', 'interface', 'long', 'native', 'new',
    'package', 'private', 'protected', 'public', 'return', 'short', 'static',
    'strictfp', 'super', 'switch', 'synchronized', 'this', 'throw', 'throws',
    'transient', 'try', 'void', 'volatile', 'while', 'true', 'false', 'null',
}


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, reserved_words: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
        """
        self.reserved_words = reserved_words or set()
        self._used_names: Set[str] = set()

    def sanitize_name(self, name: str, target_case: NamingCase = NamingCase.CAMEL_CASE,
                      suffix_on_conflict: str = "_") -> str:
        """
        Sanitize a name for safe use in generated code.

        Every call reserves the returned name, so two calls with the same
        input return different names until :meth:`reset_used_names`.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add for conflicts

        Returns:
            Sanitized name safe for use
        """
        cleaned = self._clean_basic(name, strip=target_case != NamingCase.PRESERVE)
        converted = self._convert_case(cleaned, target_case)
        if converted[0].isdigit():
            converted = f"_{converted}"
        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        self._used_names.add(final_name)
        return final_name

    def _clean_basic(self, name: str, strip: bool = True) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = re.sub(r'[^a-zA-Z0-9_]', '_', name)
        if strip:
            cleaned = cleaned.strip('_')

        if not cleaned:
            cleaned = "value"

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.PRESERVE:
            return name

        if "_" not in name:
            # Already a single word or camel/pascal; keep interior capitals
            if target_case == NamingCase.PASCAL_CASE:
                return name[0].upper() + name[1:]
            return name[0].lower() + name[1:]

        parts = [part for part in name.split('_') if part]
        if target_case == NamingCase.PASCAL_CASE:
            return ''.join(part.capitalize() for part in parts)
        return parts[0].lower() + ''.join(part.capitalize() for part in parts[1:])

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Resolve naming conflicts with reserved words and existing names."""
        if name in self.reserved_words:
            name = f"{name}{suffix}"

        original_name = name
        counter = 1
        while name in self._used_names:
            name = f"{original_name}{counter}"
            counter += 1

        return name

    def reset_used_names(self):
        """Reset the tracking of used names."""
        self._used_names.clear()

    def add_used_name(self, name: str):
        """Manually add a name to the used names set."""
        self._used_names.add(name)


def create_java_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Java identifiers."""
    return NameSanitizer(JAVA_RESERVED_WORDS)
