"""
Value types for super resolution.

Chains, cursors and resolved methods are immutable: every resolution step
produces a fresh cursor instead of narrowing shared state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Optional, Tuple, TYPE_CHECKING

from methodsuper.exceptions import MissingContextError, NoOverrideError

if TYPE_CHECKING:
    from .resolver import SuperResolver


class Level(str, Enum):
    """Dispatch level a method is looked up at."""
    INSTANCE = "instance"
    CLASS = "class"


class Visibility(str, Enum):
    """Method visibility tiers."""
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


# Search order for visibility tiers
VISIBILITIES: Tuple[Visibility, ...] = (
    Visibility.PUBLIC,
    Visibility.PROTECTED,
    Visibility.PRIVATE,
)


class AncestorKind(str, Enum):
    """Whether an ancestor is a class or a mixed-in module."""
    CLASS = "class"
    MODULE = "module"


@dataclass(frozen=True)
class VisibilityMap:
    """Names directly defined on one ancestor at one level, split by visibility."""
    public: FrozenSet[str] = frozenset()
    protected: FrozenSet[str] = frozenset()
    private: FrozenSet[str] = frozenset()

    @classmethod
    def from_sets(cls, by_visibility: Dict[Visibility, Iterable[str]]) -> Optional["VisibilityMap"]:
        """
        Build a map from per-visibility name collections.

        Returns:
            VisibilityMap, or None when no visibility holds any name
        """
        sets = {
            visibility: frozenset(by_visibility.get(visibility, ()))
            for visibility in VISIBILITIES
        }
        if not any(sets.values()):
            return None
        return cls(
            public=sets[Visibility.PUBLIC],
            protected=sets[Visibility.PROTECTED],
            private=sets[Visibility.PRIVATE],
        )

    def names(self, visibility: Visibility) -> FrozenSet[str]:
        return getattr(self, Visibility(visibility).value)

    def visibility_of(self, name: str) -> Optional[Visibility]:
        for visibility in VISIBILITIES:
            if name in self.names(visibility):
                return visibility
        return None

    def all_names(self) -> FrozenSet[str]:
        return self.public | self.protected | self.private

    def __contains__(self, name: object) -> bool:
        return self.visibility_of(name) is not None  # type: ignore[arg-type]

    def to_dict(self) -> Dict[str, list]:
        """Sorted names per non-empty visibility."""
        return {
            visibility.value: sorted(self.names(visibility))
            for visibility in VISIBILITIES
            if self.names(visibility)
        }


@dataclass(frozen=True)
class MethodTable:
    """Instance-level and class-level method names of one ancestor."""
    instance: Optional[VisibilityMap] = None
    class_: Optional[VisibilityMap] = None

    def for_level(self, level: Level) -> Optional[VisibilityMap]:
        return self.instance if Level(level) is Level.INSTANCE else self.class_

    def defines(self, level: Level, name: str) -> bool:
        # Visibility does not gate super resolution
        return self.visibility_of(level, name) is not None

    def visibility_of(self, level: Level, name: str) -> Optional[Visibility]:
        methods = self.for_level(level)
        if methods is None:
            return None
        return methods.visibility_of(name)

    @property
    def is_empty(self) -> bool:
        return self.instance is None and self.class_ is None


@dataclass(frozen=True)
class AncestorEntry:
    """One ancestor's contribution to a chain."""
    ancestor: Any
    name: str
    kind: AncestorKind
    singleton_origin: bool
    methods: MethodTable

    @property
    def label(self) -> str:
        """Diagnostic label such as '[C] Base' or 'S[M] Extension'."""
        prefix = "S" if self.singleton_origin else ""
        marker = "C" if self.kind is AncestorKind.CLASS else "M"
        return f"{prefix}[{marker}] {self.name}"

    def defines(self, level: Level, name: str) -> bool:
        return self.methods.defines(level, name)


@dataclass(frozen=True)
class AncestorChain:
    """Ordered, method-contributing ancestors of one root."""
    root: Any
    entries: Tuple[AncestorEntry, ...]
    exclude_trivial: bool = True

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[AncestorEntry]:
        return iter(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    def find(self, level: Level, name: str, start: int = 0) -> Optional[int]:
        """
        Index of the first entry at or after start defining name at level.

        Args:
            level: Dispatch level
            name: Method name
            start: First index to examine

        Returns:
            Entry index, or None if no remaining entry matches
        """
        for index in range(start, len(self.entries)):
            if self.entries[index].defines(level, name):
                return index
        return None


@dataclass(frozen=True)
class ResolutionContext:
    """The (root, level, name) a walk started from; fixed for the whole walk."""
    root: Any
    level: Level
    name: str

    def __post_init__(self):
        object.__setattr__(self, "level", Level(self.level))


@dataclass(frozen=True)
class ResolutionCursor:
    """Continuation point of a walk: the chain suffix that is left to search."""
    context: ResolutionContext
    chain: AncestorChain = field(repr=False)
    position: int = 0

    @property
    def remaining(self) -> Tuple[AncestorEntry, ...]:
        return self.chain.entries[self.position:]

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.chain)

    def after(self, index: int) -> "ResolutionCursor":
        """New cursor whose remaining chain starts right after entry index."""
        if index < self.position:
            raise ValueError(f"cursor cannot move backwards ({index} < {self.position})")
        return ResolutionCursor(context=self.context, chain=self.chain, position=index + 1)


@dataclass(frozen=True)
class ResolvedMethod:
    """A method found on some ancestor, able to resolve its own super."""
    entry: AncestorEntry
    level: Level
    name: str
    visibility: Visibility
    cursor: ResolutionCursor
    resolver: Optional["SuperResolver"] = field(default=None, compare=False, repr=False)

    @property
    def owner(self) -> Any:
        return self.entry.ancestor

    @property
    def context(self) -> ResolutionContext:
        return self.cursor.context

    def super(self) -> "ResolvedMethod":
        """The method that would run if this method called super."""
        if self.resolver is None:
            raise MissingContextError(f"{self.name} is not bound to a resolver")
        return self.resolver.next(self.cursor)

    def supers(self) -> Iterator["ResolvedMethod"]:
        """Iterate successive supers until the chain is exhausted."""
        current = self
        while True:
            try:
                current = current.super()
            except NoOverrideError:
                return
            yield current
