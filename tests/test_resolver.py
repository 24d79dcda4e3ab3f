"""
Unit tests for super resolution.

Tests first/next walks, cursor behavior, visibility-agnostic matching,
context capture and failure reporting.
"""

import pytest

from methodsuper.exceptions import MissingContextError, NoOverrideError
from methodsuper.resolution import (
    ChainLinearizer,
    Level,
    ResolutionContext,
    SuperResolver,
    Visibility,
    lookup_method,
    resolve_super,
    super_chain,
)


class TestScenarios:
    """Reference resolution scenarios"""

    def test_instance_method_resolves_to_base(self, model):
        base = model.define_class("Base")
        model.def_method(base, "meth")
        derived = model.define_class("Derived", base)
        model.def_method(derived, "meth")

        resolved = SuperResolver(model).first(ResolutionContext(derived, Level.INSTANCE, "meth"))

        assert resolved.owner is base
        assert resolved.level is Level.INSTANCE
        assert resolved.name == "meth"

    def test_class_method_prefers_extension_over_inclusion(self, model):
        ext = model.define_module("Ext")
        model.def_method(ext, "module_meth")
        inc = model.define_module("Inc")
        model.def_method(inc, "module_meth")
        base = model.define_class("Base")
        model.include(base, inc)
        derived = model.define_class("Derived", base)
        model.extend(derived, ext)
        model.def_singleton_method(derived, "module_meth")
        model.def_method(derived, "module_meth")

        resolver = SuperResolver(model)
        resolved = resolver.first(ResolutionContext(derived, Level.CLASS, "module_meth"))

        assert resolved.owner is ext
        assert resolved.entry.singleton_origin
        instance_resolved = resolver.first(ResolutionContext(derived, Level.INSTANCE, "module_meth"))
        assert instance_resolved.owner is inc

    def test_two_extensions_of_bare_class(self, model):
        m1 = model.define_module("M1")
        model.def_method(m1, "m")
        m2 = model.define_module("M2")
        model.def_method(m2, "m")
        bare = model.define_class("C")
        model.extend(bare, m1)
        model.extend(bare, m2)

        resolver = SuperResolver(model)
        context = resolver.context_for(bare, "m")
        owner = resolver.lookup(context)
        resolved = resolver.first(context)

        assert owner.owner is m2
        assert resolved.owner is m1
        with pytest.raises(NoOverrideError):
            resolver.next(resolved.cursor)

    def test_no_override_beyond_trivial_ancestors(self, model):
        lonely = model.define_class("Lonely")
        model.def_method(lonely, "meth")
        resolver = SuperResolver(model)

        with pytest.raises(NoOverrideError) as excinfo:
            resolver.first(ResolutionContext(lonely, Level.INSTANCE, "meth"))

        assert excinfo.value.root is lonely
        assert excinfo.value.level is Level.INSTANCE
        assert excinfo.value.name == "meth"
        assert "Lonely" in str(excinfo.value)

    def test_method_only_on_trivial_ancestors(self, model):
        lonely = model.define_class("Lonely")
        with pytest.raises(NoOverrideError):
            SuperResolver(model).lookup(ResolutionContext(lonely, Level.INSTANCE, "to_s"))


class TestInheritanceHierarchy:
    """Base/Derived hierarchy with included and extended modules"""

    def test_singleton_method_super(self, resolver, inheritance_model):
        derived = inheritance_model["DerivedClass"]
        context = resolver.context_for(derived, "singleton_meth")

        assert resolver.first(context).owner is inheritance_model["BaseClass"]

    def test_class_level_module_method_super(self, resolver, inheritance_model):
        derived = inheritance_model["DerivedClass"]
        resolved = resolver.first(resolver.context_for(derived, "module_meth"))

        assert resolved.owner is inheritance_model["BaseExtendedModule"]
        assert resolved.level is Level.CLASS

    def test_instance_module_method_super(self, resolver, inheritance_model):
        obj = inheritance_model.new(inheritance_model["DerivedClass"])
        resolved = resolver.first(resolver.context_for(obj, "module_meth"))

        assert resolved.owner is inheritance_model["BaseIncludedModule"]
        assert resolved.level is Level.INSTANCE

    def test_instance_method_super(self, resolver, inheritance_model):
        context = resolver.instance_context(inheritance_model["DerivedClass"], "meth")
        assert resolver.first(context).owner is inheritance_model["BaseClass"]

    def test_chained_supers(self, resolver, inheritance_model):
        owner = resolver.lookup(resolver.context_for(inheritance_model["DerivedClass"], "module_meth"))
        chain = [method.owner.name for method in owner.supers()]

        assert owner.owner is inheritance_model["DerivedClass"]
        assert chain == ["BaseExtendedModule"]

    def test_resolve_all(self, resolver, inheritance_model):
        context = resolver.instance_context(inheritance_model["DerivedClass"], "module_meth")
        assert [m.owner.name for m in resolver.resolve_all(context)] == ["BaseIncludedModule"]


class TestVisibility:
    """Visibility does not gate matching"""

    def test_private_override_intercepts(self, visibility_model):
        resolver = SuperResolver(visibility_model)
        resolved = resolver.first(resolver.instance_context(visibility_model["Bottom"], "run"))

        assert resolved.owner is visibility_model["Middle"]
        assert resolved.visibility is Visibility.PRIVATE
        assert resolved.super().owner is visibility_model["Top"]
        assert resolved.super().visibility is Visibility.PUBLIC

    def test_protected_ancestor_method_found(self, visibility_model):
        resolver = SuperResolver(visibility_model)
        resolved = resolver.first(resolver.instance_context(visibility_model["Bottom"], "check"))

        assert resolved.owner is visibility_model["Top"]
        assert resolved.visibility is Visibility.PROTECTED


class TestCursor:
    """Cursor values are immutable and only move forward"""

    def test_cursor_strictly_shrinks(self, visibility_model):
        resolver = SuperResolver(visibility_model)
        current = resolver.lookup(resolver.instance_context(visibility_model["Bottom"], "run"))

        while True:
            before = current.cursor
            try:
                current = resolver.next(before)
            except NoOverrideError:
                break
            after = current.cursor
            assert after.position > before.position
            assert len(after.remaining) < len(before.remaining)
            assert before.remaining[len(before.remaining) - len(after.remaining):] == after.remaining

    def test_cursor_reuse_is_repeatable(self, resolver, inheritance_model):
        resolved = resolver.lookup(resolver.instance_context(inheritance_model["DerivedClass"], "meth"))

        assert resolver.next(resolved.cursor) == resolver.next(resolved.cursor)
        assert resolved.cursor.position == 1

    def test_idempotent_restart(self, visibility_model):
        resolver = SuperResolver(visibility_model)
        context = resolver.instance_context(visibility_model["Bottom"], "run")

        def walk():
            first = resolver.first(context)
            return [first] + list(first.supers())

        assert walk() == walk()
        assert [m.owner.name for m in walk()] == ["Middle", "Top"]

    def test_walk_terminates(self, inheritance_model):
        resolver = SuperResolver(inheritance_model, exclude_trivial=False)
        context = resolver.instance_context(inheritance_model["DerivedClass"], "to_s")
        current = resolver.lookup(context)

        steps = 0
        with pytest.raises(NoOverrideError):
            while steps < 100:
                current = resolver.next(current.cursor)
                steps += 1
        assert current.owner is inheritance_model.kernel

    def test_context_is_fixed_across_steps(self, visibility_model):
        resolver = SuperResolver(visibility_model)
        context = resolver.instance_context(visibility_model["Bottom"], "run")
        first = resolver.first(context)

        assert first.context is context
        assert first.super().context is context


class TestContextCapture:
    """Explicit context capture and missing contexts"""

    def test_context_for_type_is_class_level(self, resolver, inheritance_model):
        context = resolver.context_for(inheritance_model["BaseClass"], "singleton_meth")
        assert context == ResolutionContext(inheritance_model["BaseClass"], Level.CLASS, "singleton_meth")

    def test_context_for_object_is_instance_level(self, resolver, inheritance_model):
        obj = inheritance_model.new(inheritance_model["BaseClass"])
        context = resolver.context_for(obj, "meth")
        assert context.root is inheritance_model["BaseClass"]
        assert context.level is Level.INSTANCE

    def test_level_given_as_string(self, inheritance_model):
        context = ResolutionContext(inheritance_model["DerivedClass"], "class", "singleton_meth")
        assert context.level is Level.CLASS

    def test_next_without_cursor(self, resolver):
        with pytest.raises(MissingContextError):
            resolver.next(None)

    def test_lookup_without_context(self, resolver):
        with pytest.raises(MissingContextError):
            resolver.lookup(None)

    def test_super_of_requires_context(self, resolver):
        with pytest.raises(MissingContextError):
            resolver.super_of(object())

    def test_super_of_accepts_resolved_methods_and_contexts(self, resolver, inheritance_model):
        context = resolver.instance_context(inheritance_model["DerivedClass"], "meth")
        owner = resolver.lookup(context)

        class CapturedMethod:
            def __init__(self, context):
                self.context = context

        assert resolver.super_of(owner).owner is inheritance_model["BaseClass"]
        assert resolver.super_of(CapturedMethod(context)).owner is inheritance_model["BaseClass"]

    def test_unbound_resolved_method(self, resolver, inheritance_model):
        from dataclasses import replace

        owner = resolver.lookup(resolver.instance_context(inheritance_model["DerivedClass"], "meth"))
        with pytest.raises(MissingContextError):
            replace(owner, resolver=None).super()


class TestLimitsAndSharing:
    """Configuration and shared linearizers"""

    def test_step_limit(self, visibility_model):
        resolver = SuperResolver(visibility_model, max_super_steps=1)
        context = resolver.instance_context(visibility_model["Bottom"], "run")
        assert [m.owner.name for m in resolver.resolve_all(context)] == ["Middle"]

    def test_shared_linearizer(self, inheritance_model):
        linearizer = ChainLinearizer(inheritance_model)
        first = SuperResolver(inheritance_model, linearizer=linearizer)
        second = SuperResolver(inheritance_model, linearizer=linearizer)
        derived = inheritance_model["DerivedClass"]

        a = first.lookup(first.instance_context(derived, "meth"))
        b = second.lookup(second.instance_context(derived, "meth"))
        assert a.cursor.chain is b.cursor.chain


class TestFacade:
    """Module-level helpers"""

    def test_resolve_super(self, inheritance_model):
        resolved = resolve_super(inheritance_model, inheritance_model["DerivedClass"], "meth")
        assert resolved.owner is inheritance_model["BaseClass"]

    def test_super_chain(self, visibility_model):
        owners = super_chain(visibility_model, visibility_model["Bottom"], "run")
        assert [m.owner.name for m in owners] == ["Middle", "Top"]

    def test_super_chain_empty_at_top(self, visibility_model):
        assert super_chain(visibility_model, visibility_model["Top"], "run") == []

    def test_lookup_method_infers_level(self, inheritance_model):
        owner = lookup_method(inheritance_model, inheritance_model["DerivedClass"], "singleton_meth")
        assert owner.level is Level.CLASS
        assert owner.owner is inheritance_model["DerivedClass"]
        assert owner.super().owner is inheritance_model["BaseClass"]

    def test_lookup_method_explicit_level(self, inheritance_model):
        owner = lookup_method(
            inheritance_model, inheritance_model["DerivedClass"], "meth", level=Level.INSTANCE
        )
        assert owner.level is Level.INSTANCE
