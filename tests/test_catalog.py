"""
Unit tests for the visibility catalog.
"""

from methodsuper.resolution import Level, MethodTable, Visibility, VisibilityCatalog, VisibilityMap


class TestVisibilityMap:
    """VisibilityMap construction and queries"""

    def test_empty_sets_produce_no_map(self):
        assert VisibilityMap.from_sets({}) is None
        assert VisibilityMap.from_sets({Visibility.PUBLIC: []}) is None

    def test_visibility_of(self):
        methods = VisibilityMap.from_sets({
            Visibility.PUBLIC: ["run"],
            Visibility.PRIVATE: ["prepare"],
        })
        assert methods.visibility_of("run") is Visibility.PUBLIC
        assert methods.visibility_of("prepare") is Visibility.PRIVATE
        assert methods.visibility_of("missing") is None
        assert "prepare" in methods
        assert methods.all_names() == {"run", "prepare"}

    def test_to_dict_skips_empty_visibilities(self):
        methods = VisibilityMap.from_sets({Visibility.PROTECTED: ["b", "a"]})
        assert methods.to_dict() == {"protected": ["a", "b"]}


class TestMethodTable:
    """Level-aware lookups"""

    def test_defines_ignores_visibility(self):
        table = MethodTable(instance=VisibilityMap.from_sets({Visibility.PRIVATE: ["run"]}))
        assert table.defines(Level.INSTANCE, "run")
        assert not table.defines(Level.CLASS, "run")

    def test_is_empty(self):
        assert MethodTable().is_empty
        assert not MethodTable(class_=VisibilityMap(public=frozenset({"x"}))).is_empty


class TestVisibilityCatalog:
    """Collecting directly defined methods"""

    def test_collect_partitions_by_level_and_visibility(self, inheritance_model):
        catalog = VisibilityCatalog(inheritance_model)
        table = catalog.collect(inheritance_model["DerivedClass"])

        assert table.instance.public == {"meth", "module_meth"}
        assert table.class_.public == {"singleton_meth", "module_meth"}
        assert table.instance.private == frozenset()

    def test_collect_excludes_inherited(self, inheritance_model):
        middle = inheritance_model.define_class("Middle", inheritance_model["BaseClass"])
        table = VisibilityCatalog(inheritance_model).collect(middle)

        assert table.is_empty

    def test_collect_without_class_level(self, inheritance_model):
        table = VisibilityCatalog(inheritance_model).collect(
            inheritance_model["BaseClass"], include_class_level=False
        )
        assert table.class_ is None
        assert table.instance.public == {"meth"}

    def test_collect_singleton_moves_instance_methods_to_class_level(self, inheritance_model):
        table = VisibilityCatalog(inheritance_model).collect_singleton(
            inheritance_model["BaseExtendedModule"]
        )
        assert table.instance is None
        assert table.class_.public == {"module_meth"}

    def test_all_visibilities_collected(self, visibility_model):
        catalog = VisibilityCatalog(visibility_model)
        top = catalog.collect(visibility_model["Top"])
        middle = catalog.collect(visibility_model["Middle"])

        assert top.instance.protected == {"check"}
        assert middle.instance.private == {"run"}
        assert middle.instance.public == frozenset()
