"""
Public API for super resolution.

Provides one-call helpers over ChainLinearizer and SuperResolver.
"""

from typing import Any, List, Optional

from methodsuper.logging_config import logger
from .graph import AncestorGraph
from .linearizer import ChainLinearizer
from .resolver import SuperResolver
from .types import AncestorChain, Level, ResolutionContext, ResolvedMethod


def build_chain(
    graph: AncestorGraph,
    root: Any,
    exclude_trivial: bool = True
) -> AncestorChain:
    """
    Build the annotated ancestor chain for a root.

    Args:
        graph: Host reflection capability
        root: Class or module
        exclude_trivial: Drop ancestors shared by every fresh class

    Returns:
        AncestorChain in search order
    """
    linearizer = ChainLinearizer(graph, cache_chains=False)
    return linearizer.build(root, exclude_trivial=exclude_trivial)


def lookup_method(
    graph: AncestorGraph,
    target: Any,
    name: str,
    level: Optional[Level] = None
) -> ResolvedMethod:
    """
    Find the current owner of a method, ready for chained super() calls.

    Args:
        graph: Host reflection capability
        target: Receiver (type or object) or, with level given, the root type
        name: Method name
        level: Explicit level; inferred from target when None

    Returns:
        ResolvedMethod for the owner

    Raises:
        NoOverrideError: If nothing in the chain defines the method
    """
    resolver = SuperResolver(graph)
    if level is None:
        context = resolver.context_for(target, name)
    else:
        context = ResolutionContext(root=target, level=level, name=name)
    return resolver.lookup(context)


def resolve_super(
    graph: AncestorGraph,
    root: Any,
    name: str,
    level: Level = Level.INSTANCE
) -> ResolvedMethod:
    """
    Resolve the method a root's own name method would reach through super.

    Raises:
        NoOverrideError: If no ancestor past the owner defines the method
    """
    resolver = SuperResolver(graph)
    return resolver.first(ResolutionContext(root=root, level=level, name=name))


def super_chain(
    graph: AncestorGraph,
    root: Any,
    name: str,
    level: Level = Level.INSTANCE
) -> List[ResolvedMethod]:
    """
    List every override reachable through repeated super calls.

    Returns:
        Overrides nearest first; empty when the owner has no super
    """
    resolver = SuperResolver(graph)
    resolved = resolver.resolve_all(ResolutionContext(root=root, level=level, name=name))
    logger.debug(f"Super chain of {name}: {[method.entry.label for method in resolved]}")
    return resolved
