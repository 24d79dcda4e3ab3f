"""
methodsuper - resumable super resolution over class/module ancestor chains.

Builds the ancestor chain searched for a method, including modules mixed in
at the class level, and answers which ancestor a method's super call would
reach, repeatedly.
"""

__version__ = "0.3.0"

# Core exports
from methodsuper.exceptions import (
    MethodSuperError,
    MissingContextError,
    NoOverrideError,
    AmbiguousSingletonOriginError,
)
from methodsuper.resolution import (
    AncestorChain,
    AncestorEntry,
    AncestorGraph,
    ChainLinearizer,
    Level,
    ResolutionContext,
    ResolutionCursor,
    ResolvedMethod,
    SuperResolver,
    Visibility,
    VisibilityCatalog,
    build_chain,
    lookup_method,
    resolve_super,
    super_chain,
)
from methodsuper.hosts import ObjectModel, PythonAncestorGraph

__all__ = [
    "__version__",
    "MethodSuperError",
    "MissingContextError",
    "NoOverrideError",
    "AmbiguousSingletonOriginError",
    "AncestorChain",
    "AncestorEntry",
    "AncestorGraph",
    "ChainLinearizer",
    "Level",
    "ResolutionContext",
    "ResolutionCursor",
    "ResolvedMethod",
    "SuperResolver",
    "Visibility",
    "VisibilityCatalog",
    "build_chain",
    "lookup_method",
    "resolve_super",
    "super_chain",
    "ObjectModel",
    "PythonAncestorGraph",
]
