"""
In-memory model of generated Java classes.
"""

from .code import CodeModel
from .javadoc import JavadocModel, JavadocWriter
from .method import Argument, MethodModel
from .field import FieldModel
from .class_model import ClassModel

__all__ = [
    "CodeModel",
    "JavadocModel",
    "JavadocWriter",
    "Argument",
    "MethodModel",
    "FieldModel",
    "ClassModel",
]
