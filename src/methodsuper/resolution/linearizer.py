"""
Chain Linearizer.

Builds the ordered ancestor chain searched by super resolution, with
entries for modules extended at the singleton level placed right after the
ancestor that introduced them.
"""

from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from methodsuper.exceptions import AmbiguousSingletonOriginError
from methodsuper.logging_config import logger
from .catalog import VisibilityCatalog
from .config import resolution_settings
from .graph import AncestorGraph
from .types import AncestorChain, AncestorEntry, AncestorKind, MethodTable

_ALL = object()


class ChainLinearizer:
    """
    Computes and caches AncestorChains per root.

    Ancestor order comes from the host graph and is not re-derived here.
    Ancestors every fresh class shares are dropped by default; otherwise
    each chain would end in the same generic fallbacks and a walk could
    never report that no real override is left.
    """

    def __init__(
        self,
        graph: AncestorGraph,
        catalog: Optional[VisibilityCatalog] = None,
        exclude_trivial: Optional[bool] = None,
        cache_chains: Optional[bool] = None,
    ):
        """
        Initialize the linearizer.

        Args:
            graph: Host reflection capability
            catalog: Method table collector (defaults to one over graph)
            exclude_trivial: Default for build() when not given per call
            cache_chains: Whether built chains are cached per root
        """
        self.graph = graph
        self.catalog = catalog or VisibilityCatalog(graph)
        self.config = resolution_settings(
            exclude_trivial=exclude_trivial,
            cache_chains=cache_chains,
        )
        self._chain_cache: Dict[Tuple[Any, bool], AncestorChain] = {}

    def build(self, root: Any, exclude_trivial: Optional[bool] = None) -> AncestorChain:
        """
        Return the chain for root, building it on first use.

        Args:
            root: Class or module the chain is built for
            exclude_trivial: Drop universal ancestors (defaults to config)

        Returns:
            AncestorChain shared by every caller asking for the same root
        """
        if exclude_trivial is None:
            exclude_trivial = self.config["exclude_trivial"]
        key = (root, bool(exclude_trivial))

        if self.config["cache_chains"]:
            cached = self._chain_cache.get(key)
            if cached is not None:
                return cached

        chain = self._construct(root, bool(exclude_trivial))

        if self.config["cache_chains"]:
            # A concurrent build of the same root may have won; keep the stored one
            chain = self._chain_cache.setdefault(key, chain)
        return chain

    def clear_cache(self, root: Any = _ALL) -> None:
        """Forget cached chains for root, or for every root when omitted."""
        if root is _ALL:
            self._chain_cache.clear()
            return
        for key in [key for key in self._chain_cache if key[0] == root]:
            self._chain_cache.pop(key, None)

    def _construct(self, root: Any, exclude_trivial: bool) -> AncestorChain:
        root_name = self.graph.name_of(root)
        logger.debug(f"Building ancestor chain for {root_name} (exclude_trivial={exclude_trivial})")

        ancestors = self._ancestors(root, exclude_trivial)
        introduced = self._introduced_singleton_ancestors(ancestors, exclude_trivial)

        # Modules don't inherit class methods from the modules they include
        root_is_module = self.graph.kind_of(root) is AncestorKind.MODULE

        entries: List[AncestorEntry] = []
        for ancestor in ancestors:
            methods = self.catalog.collect(
                ancestor,
                include_class_level=not (root_is_module and ancestor != root),
            )
            self._append_entry(entries, ancestor, False, methods)

            for singleton_ancestor in introduced.get(ancestor, ()):
                self._append_entry(
                    entries,
                    singleton_ancestor,
                    True,
                    self.catalog.collect_singleton(singleton_ancestor),
                )

        chain = AncestorChain(root=root, entries=tuple(entries), exclude_trivial=exclude_trivial)
        logger.debug(f"Chain for {root_name}: {[entry.label for entry in chain]}")
        return chain

    def _ancestors(self, root: Any, exclude_trivial: bool) -> List[Any]:
        ancestors = list(self.graph.ancestors_of(root))
        if not exclude_trivial:
            return ancestors
        trivial = set(self.graph.trivial_ancestors())
        return [ancestor for ancestor in ancestors if ancestor not in trivial]

    def _introduced_singleton_ancestors(
        self,
        ancestors: Sequence[Any],
        exclude_trivial: bool,
    ) -> Dict[Any, List[Any]]:
        """
        Map each ancestor to the singleton ancestors it introduces.

        Later ancestors' singleton lineages are contained in earlier ones',
        so walking in reverse and subtracting what was already seen leaves
        exactly the point where each singleton ancestor first appears.

        Raises:
            AmbiguousSingletonOriginError: If a singleton ancestor would be
                attributed to two introducing ancestors
        """
        trivial: Set[Any] = set()
        if exclude_trivial:
            trivial = set(self.graph.trivial_singleton_ancestors())

        introduced: Dict[Any, List[Any]] = {}
        origins: Dict[Any, Any] = {}
        seen: Set[Any] = set()

        for ancestor in reversed(ancestors):
            lineage = [
                singleton_ancestor
                for singleton_ancestor in self.graph.ancestors_of(self.graph.singleton_of(ancestor))
                if singleton_ancestor not in trivial
            ]
            introduces = [singleton_ancestor for singleton_ancestor in lineage if singleton_ancestor not in seen]

            for singleton_ancestor in introduces:
                if singleton_ancestor in origins:
                    raise AmbiguousSingletonOriginError(
                        singleton_ancestor, origins[singleton_ancestor], ancestor
                    )
                origins[singleton_ancestor] = ancestor

            if introduces:
                introduced[ancestor] = introduces
            seen.update(lineage)

        return introduced

    def _append_entry(
        self,
        entries: List[AncestorEntry],
        ancestor: Any,
        singleton_origin: bool,
        methods: MethodTable,
    ) -> None:
        # Ancestor is included only when it contributes some methods
        if methods.is_empty:
            return
        entries.append(AncestorEntry(
            ancestor=ancestor,
            name=self.graph.name_of(ancestor),
            kind=self.graph.kind_of(ancestor),
            singleton_origin=singleton_origin,
            methods=methods,
        ))
