"""
AncestorGraph over live Python classes.

Ancestors come from __mro__ and a class's singleton is its metaclass, so
methods defined on a custom metaclass show up as class-level methods of every
class using it. Visibility follows naming conventions: dunder and plain names
are public, a single leading underscore is protected, and class-private
(name-mangled) attributes are private.
"""

import inspect
from typing import Any, List, Set

from methodsuper.resolution.graph import AncestorGraph
from methodsuper.resolution.types import AncestorKind, Level, Visibility

# Attributes reachable on the class object itself rather than on instances
CLASS_LEVEL_TYPES = (classmethod, staticmethod, type(dict.__dict__["fromkeys"]))


def classify_visibility(owner: type, name: str) -> Visibility:
    """Visibility tier implied by an attribute name defined on owner."""
    if name.startswith("__") and name.endswith("__"):
        return Visibility.PUBLIC
    mangled_prefix = f"_{owner.__name__.lstrip('_')}__"
    if name.startswith(mangled_prefix):
        return Visibility.PRIVATE
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def is_instance_routine(value: Any) -> bool:
    if isinstance(value, CLASS_LEVEL_TYPES):
        return False
    return inspect.isroutine(value) or inspect.ismethoddescriptor(value)


class PythonAncestorGraph(AncestorGraph):
    """Reflection over Python's own type system."""

    def ancestors_of(self, type_: type) -> List[type]:
        return list(inspect.getmro(type_))

    def directly_defined_methods(self, type_: type, level: Level, visibility: Visibility) -> Set[str]:
        wanted = Visibility(visibility)
        class_level = Level(level) is Level.CLASS
        names = set()

        for name, value in vars(type_).items():
            if class_level:
                matches = isinstance(value, CLASS_LEVEL_TYPES)
            else:
                matches = is_instance_routine(value)
            if matches and classify_visibility(type_, name) is wanted:
                names.add(name)
        return names

    def singleton_of(self, type_: type) -> type:
        return type(type_)

    def trivial_ancestors(self) -> List[type]:
        fresh = type("_Fresh", (), {})
        return list(inspect.getmro(fresh))[1:]

    def trivial_singleton_ancestors(self) -> List[type]:
        return list(inspect.getmro(type))

    def kind_of(self, type_: type) -> AncestorKind:
        # Python has no separate module kind; mixins are plain classes
        return AncestorKind.CLASS

    def name_of(self, type_: type) -> str:
        return getattr(type_, "__qualname__", None) or repr(type_)
