"""
Resolution package: ancestor chains and super resolution.

Provides chain linearization over a host reflection graph, per-ancestor
visibility catalogs and resumable super walks.
"""

from .facade import (
    build_chain,
    lookup_method,
    resolve_super,
    super_chain,
)
from .graph import AncestorGraph
from .catalog import VisibilityCatalog
from .linearizer import ChainLinearizer
from .resolver import SuperResolver
from .types import (
    AncestorChain,
    AncestorEntry,
    AncestorKind,
    Level,
    MethodTable,
    ResolutionContext,
    ResolutionCursor,
    ResolvedMethod,
    Visibility,
    VisibilityMap,
    VISIBILITIES,
)
from .config import RESOLUTION_CONFIG

__all__ = [
    "build_chain",
    "lookup_method",
    "resolve_super",
    "super_chain",
    "AncestorGraph",
    "VisibilityCatalog",
    "ChainLinearizer",
    "SuperResolver",
    "AncestorChain",
    "AncestorEntry",
    "AncestorKind",
    "Level",
    "MethodTable",
    "ResolutionContext",
    "ResolutionCursor",
    "ResolvedMethod",
    "Visibility",
    "VisibilityMap",
    "VISIBILITIES",
    "RESOLUTION_CONFIG",
]
