"""
Diagnostic reports for chains and super walks.

Turns resolution results into pydantic models that the CLI prints as JSON
or rich tables, including the NoOverride details explaining where a walk
stopped.
"""

from typing import Optional

from methodsuper.exceptions import NoOverrideError
from methodsuper.logging_config import logger
from methodsuper.resolution.graph import AncestorGraph
from methodsuper.resolution.resolver import SuperResolver
from methodsuper.resolution.types import AncestorChain, ResolutionContext, ResolvedMethod
from methodsuper.schemas import (
    ChainEntryReport,
    ChainReport,
    NoOverrideReport,
    SuperChainReport,
    SuperStepReport,
)


def chain_report(graph: AncestorGraph, chain: AncestorChain) -> ChainReport:
    """
    Describe every entry of a chain.

    Args:
        graph: Graph the chain was built from (used for the root name)
        chain: Built AncestorChain

    Returns:
        ChainReport in search order
    """
    entries = []
    for index, entry in enumerate(chain):
        instance = entry.methods.instance
        class_ = entry.methods.class_
        entries.append(ChainEntryReport(
            index=index,
            label=entry.label,
            name=entry.name,
            kind=entry.kind.value,
            singleton_origin=entry.singleton_origin,
            instance_methods=instance.to_dict() if instance else {},
            class_methods=class_.to_dict() if class_ else {},
        ))

    return ChainReport(
        root=graph.name_of(chain.root),
        exclude_trivial=chain.exclude_trivial,
        entries=entries,
    )


def no_override_report(error: NoOverrideError) -> NoOverrideReport:
    return NoOverrideReport(
        root=error.root_name,
        level=getattr(error.level, "value", error.level),
        name=error.name,
        message=str(error),
    )


def _step_report(step: int, method: ResolvedMethod) -> SuperStepReport:
    return SuperStepReport(
        step=step,
        owner=method.entry.name,
        label=method.entry.label,
        level=method.level.value,
        name=method.name,
        visibility=method.visibility.value,
        remaining=len(method.cursor.remaining),
    )


def super_chain_report(
    resolver: SuperResolver,
    context: ResolutionContext,
    max_steps: Optional[int] = None
) -> SuperChainReport:
    """
    Walk a method's supers and record each step plus the reason it stopped.

    Args:
        resolver: Resolver to walk with
        context: Method to start from
        max_steps: Step limit (defaults to the resolver's max_super_steps)

    Returns:
        SuperChainReport whose first step is the current owner

    Raises:
        NoOverrideError: If the method is not defined anywhere in the chain
    """
    if max_steps is None:
        max_steps = resolver.config["max_super_steps"]

    current = resolver.lookup(context)
    report = SuperChainReport(
        root=resolver.graph.name_of(context.root),
        level=context.level.value,
        name=context.name,
        steps=[_step_report(0, current)],
    )

    for step in range(1, max_steps + 1):
        try:
            current = resolver.next(current.cursor)
        except NoOverrideError as e:
            report.stopped = no_override_report(e)
            return report
        report.steps.append(_step_report(step, current))

    logger.warning(f"Super walk of {context.name} truncated after {max_steps} steps")
    return report
