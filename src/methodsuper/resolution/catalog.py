"""
Visibility catalog: per-ancestor method tables.
"""

from typing import Any, Dict, Optional, Set

from .graph import AncestorGraph
from .types import Level, MethodTable, VISIBILITIES, Visibility, VisibilityMap


class VisibilityCatalog:
    """
    Partitions an ancestor's directly defined methods by visibility.

    Only directly defined names are collected. Inherited availability is
    what chain ordering encodes, so counting it here would repeat every
    ancestor's methods at each descendant.
    """

    def __init__(self, graph: AncestorGraph):
        self.graph = graph

    def collect(self, ancestor: Any, include_class_level: bool = True) -> MethodTable:
        """
        Collect instance-level and class-level methods of an ancestor.

        Args:
            ancestor: Type whose own methods are collected
            include_class_level: Whether singleton methods contribute

        Returns:
            MethodTable with absent levels set to None
        """
        class_methods = None
        if include_class_level:
            class_methods = self._collect_level(ancestor, Level.CLASS)

        return MethodTable(
            instance=self._collect_level(ancestor, Level.INSTANCE),
            class_=class_methods,
        )

    def collect_singleton(self, singleton_ancestor: Any) -> MethodTable:
        """
        Collect methods a singleton ancestor contributes at class level.

        An extended module's instance methods become class methods of the
        extending type.
        """
        return MethodTable(class_=self._collect_level(singleton_ancestor, Level.INSTANCE))

    def _collect_level(self, ancestor: Any, level: Level) -> Optional[VisibilityMap]:
        by_visibility: Dict[Visibility, Set[str]] = {}
        for visibility in VISIBILITIES:
            names = self.graph.directly_defined_methods(ancestor, level, visibility)
            if names:
                by_visibility[visibility] = set(names)
        return VisibilityMap.from_sets(by_visibility)
