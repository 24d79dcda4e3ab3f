"""
Host reflection graphs.

- object_model: in-memory classes and modules with include/extend
- python_host: live Python classes via __mro__ and metaclasses
"""

from .object_model import ObjectModel, HostType, HostObject, SingletonClass
from .python_host import PythonAncestorGraph, classify_visibility

__all__ = [
    "ObjectModel",
    "HostType",
    "HostObject",
    "SingletonClass",
    "PythonAncestorGraph",
    "classify_visibility",
]
