"""
Super Resolver.

Answers "which method would run if this method called super?" by walking an
ancestor chain from the current owner, and resumes the walk from the cursor
returned with every answer.
"""

from typing import Any, List, Optional

from methodsuper.exceptions import MissingContextError, NoOverrideError
from methodsuper.logging_config import logger
from .config import resolution_settings
from .graph import AncestorGraph
from .linearizer import ChainLinearizer
from .types import (
    Level,
    ResolutionContext,
    ResolutionCursor,
    ResolvedMethod,
)


class SuperResolver:
    """
    Resolves successive overrides of a method.

    Usage:
        resolver = SuperResolver(graph)
        context = resolver.instance_context(Derived, "meth")
        parent = resolver.first(context)
        grandparent = parent.super()

    Every match is made on the method name at the context's level in any
    visibility: a private override still intercepts a public ancestor method.
    """

    def __init__(
        self,
        graph: AncestorGraph,
        linearizer: Optional[ChainLinearizer] = None,
        exclude_trivial: Optional[bool] = None,
        max_super_steps: Optional[int] = None,
    ):
        """
        Initialize the resolver.

        Args:
            graph: Host reflection capability
            linearizer: Chain builder to share (defaults to a new one over graph)
            exclude_trivial: Passed to a newly created linearizer
            max_super_steps: Step limit for resolve_all
        """
        self.graph = graph
        self.linearizer = linearizer or ChainLinearizer(graph, exclude_trivial=exclude_trivial)
        self.config = resolution_settings(max_super_steps=max_super_steps)

    # Context capture

    def instance_context(self, root: Any, name: str) -> ResolutionContext:
        """Context for the instance method name as seen on root."""
        return ResolutionContext(root=root, level=Level.INSTANCE, name=name)

    def context_for(self, target: Any, name: str) -> ResolutionContext:
        """
        Context for looking up name on a receiver.

        A class or module receiver looks up its class-level method; any
        other object looks up the instance method of its type.
        """
        if self.graph.is_type(target):
            return ResolutionContext(root=target, level=Level.CLASS, name=name)
        return ResolutionContext(root=self.graph.type_of(target), level=Level.INSTANCE, name=name)

    # Resolution

    def lookup(self, context: ResolutionContext) -> ResolvedMethod:
        """
        Locate the entry that currently owns the method.

        The returned method's cursor is positioned right after the owner, so
        its super() is the first override.

        Raises:
            MissingContextError: If context is None
            NoOverrideError: If no chain entry defines the method
        """
        if context is None:
            raise MissingContextError()

        chain = self.linearizer.build(context.root)
        cursor = ResolutionCursor(context=context, chain=chain, position=0)
        owner_index = chain.find(context.level, context.name)

        if owner_index is None:
            raise self._no_override(context)

        return self._resolved(cursor, owner_index)

    def first(self, context: ResolutionContext) -> ResolvedMethod:
        """
        Resolve the method that the original owner's super would call.

        The original owner is skipped: the search starts at the entry after it.

        Raises:
            MissingContextError: If context is None
            NoOverrideError: If nothing past the owner defines the method
        """
        return self.next(self.lookup(context).cursor)

    def next(self, cursor: ResolutionCursor) -> ResolvedMethod:
        """
        Resume a walk from cursor without re-locating the owner.

        Raises:
            MissingContextError: If cursor carries no context
            NoOverrideError: If the remaining chain has no match
        """
        context = getattr(cursor, "context", None)
        if context is None:
            raise MissingContextError()

        index = cursor.chain.find(context.level, context.name, start=cursor.position)
        if index is None:
            raise self._no_override(context)

        return self._resolved(cursor, index)

    def super_of(self, method_like: Any) -> ResolvedMethod:
        """
        Super of anything carrying a cursor or a captured context.

        Raises:
            MissingContextError: If method_like captured neither
        """
        cursor = getattr(method_like, "cursor", None)
        if isinstance(cursor, ResolutionCursor):
            return self.next(cursor)

        context = getattr(method_like, "context", None)
        if isinstance(context, ResolutionContext):
            return self.first(context)

        raise MissingContextError(f"{method_like!r} doesn't have a resolution context captured")

    def resolve_all(self, context: ResolutionContext) -> List[ResolvedMethod]:
        """
        Every successive override after the original owner, nearest first.

        Returns:
            Possibly empty list; stops at the end of the chain or at the
            configured step limit
        """
        resolved: List[ResolvedMethod] = []
        current = self.lookup(context)

        while len(resolved) < self.config["max_super_steps"]:
            try:
                current = self.next(current.cursor)
            except NoOverrideError:
                return resolved
            resolved.append(current)

        logger.warning(
            f"Stopped resolving supers of {context.name} after {len(resolved)} steps"
        )
        return resolved

    def _resolved(self, cursor: ResolutionCursor, index: int) -> ResolvedMethod:
        context = cursor.context
        entry = cursor.chain[index]
        logger.debug(f"Resolved {context.level.value} method {context.name} on {entry.label}")
        return ResolvedMethod(
            entry=entry,
            level=context.level,
            name=context.name,
            visibility=entry.methods.visibility_of(context.level, context.name),
            cursor=cursor.after(index),
            resolver=self,
        )

    def _no_override(self, context: ResolutionContext) -> NoOverrideError:
        logger.debug(f"No override of {context.level.value} method {context.name} left")
        return NoOverrideError(
            context.root,
            context.level,
            context.name,
            root_name=self.graph.name_of(context.root),
        )
