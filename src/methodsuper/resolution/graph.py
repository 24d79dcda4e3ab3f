"""
Reflection capability consumed by chain construction.

An AncestorGraph answers questions about a host object model: linearized
ancestors, directly defined method names per level and visibility, and the
singleton (metaclass) of a type. Resolution never inspects types any other
way, so any host that can enumerate supertypes, mixins and method names can
be plugged in.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence, Set

from .types import AncestorKind, Level, Visibility


class AncestorGraph(ABC):
    """Read-only view over a host's types, mixins and method tables."""

    @abstractmethod
    def ancestors_of(self, type_: Any) -> Sequence[Any]:
        """Linearized ancestors of type_, starting with type_ itself."""

    @abstractmethod
    def directly_defined_methods(
        self,
        type_: Any,
        level: Level,
        visibility: Visibility,
    ) -> Set[str]:
        """
        Names defined on type_ itself (not inherited) at level and visibility.

        Level.CLASS asks for methods defined on the singleton of type_.
        """

    @abstractmethod
    def singleton_of(self, type_: Any) -> Any:
        """The singleton (per-type metaclass) of type_."""

    @abstractmethod
    def trivial_ancestors(self) -> Sequence[Any]:
        """Ancestors every freshly created class has."""

    @abstractmethod
    def trivial_singleton_ancestors(self) -> Sequence[Any]:
        """Singleton ancestors every freshly created class has."""

    @abstractmethod
    def kind_of(self, type_: Any) -> AncestorKind:
        """Whether type_ is a class or a module."""

    def name_of(self, type_: Any) -> str:
        return getattr(type_, "__name__", None) or str(type_)

    def is_type(self, obj: Any) -> bool:
        """True when obj is a class or module rather than a plain object."""
        return isinstance(obj, type)

    def type_of(self, obj: Any) -> Any:
        return type(obj)
