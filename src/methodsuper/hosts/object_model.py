"""
In-memory class/module object model.

Classes have a single superclass, modules are mixed in with include (instance
level) or extend (class level), and each type keeps separate instance and
singleton method tables with public/protected/private visibility. Every class
descends from the built-in Object (which includes Kernel) and BasicObject;
those, together with Module and Class on the singleton side, form the trivial
ancestor set.

Singleton lineages list the modules a type and its superclasses extend,
followed by the built-in Class/Module tail. Per-type singleton classes do not
appear in them: a type's own class-level methods belong to its regular chain
entry.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set

from methodsuper.exceptions import ObjectModelError
from methodsuper.logging_config import logger
from methodsuper.resolution.graph import AncestorGraph
from methodsuper.resolution.types import AncestorKind, Level, Visibility


@dataclass(eq=False)
class HostType:
    """A class or module of the object model."""
    name: str
    kind: AncestorKind
    superclass: Optional["HostType"] = None
    includes: List["HostType"] = field(default_factory=list)
    extends: List["HostType"] = field(default_factory=list)
    instance_methods: Dict[str, Visibility] = field(default_factory=dict)
    singleton_methods: Dict[str, Visibility] = field(default_factory=dict)

    def __post_init__(self):
        self.singleton = SingletonClass(self)

    def __repr__(self) -> str:
        return f"<{self.kind.value} {self.name}>"


@dataclass(eq=False)
class SingletonClass:
    """Per-type singleton holding the type's class-level methods."""
    attached: HostType

    @property
    def name(self) -> str:
        return f"#<Class:{self.attached.name}>"

    def __repr__(self) -> str:
        return self.name


@dataclass(eq=False)
class HostObject:
    """An instance of a class in the object model."""
    cls: HostType

    def __repr__(self) -> str:
        return f"#<{self.cls.name}>"


class ObjectModel(AncestorGraph):
    """
    Mutable object model that doubles as an AncestorGraph.

    Usage:
        model = ObjectModel()
        base = model.define_class("Base")
        model.def_method(base, "meth")
        derived = model.define_class("Derived", base)
        model.def_method(derived, "meth")
    """

    def __init__(self):
        self._types: Dict[str, HostType] = {}

        self.basic_object = self._register(HostType("BasicObject", AncestorKind.CLASS))
        self.kernel = self._register(HostType("Kernel", AncestorKind.MODULE))
        self.object = self._register(HostType("Object", AncestorKind.CLASS, superclass=self.basic_object))
        self.object.includes.append(self.kernel)
        self.module = self._register(HostType("Module", AncestorKind.CLASS, superclass=self.object))
        self.class_ = self._register(HostType("Class", AncestorKind.CLASS, superclass=self.module))

        self._define_builtin_methods()

    # Declarations

    def define_class(self, name: str, superclass: Optional[HostType] = None) -> HostType:
        """
        Declare a class.

        Args:
            name: Unique type name
            superclass: Parent class (defaults to Object)

        Raises:
            ObjectModelError: If the name is taken or superclass is a module
        """
        superclass = superclass or self.object
        if superclass.kind is not AncestorKind.CLASS:
            raise ObjectModelError(f"superclass must be a class, got {superclass!r}")
        return self._register(HostType(name, AncestorKind.CLASS, superclass=superclass))

    def define_module(self, name: str) -> HostType:
        """Declare a module."""
        return self._register(HostType(name, AncestorKind.MODULE))

    def include(self, target: HostType, *modules: HostType) -> HostType:
        """
        Mix modules into target's instance level.

        include(C, A, B) behaves like including B and then A, so A ends up
        first in C's ancestors.
        """
        for module in reversed(modules):
            self._check_mixin(target, module)
            if module not in target.includes:
                target.includes.append(module)
        return target

    def extend(self, target: HostType, *modules: HostType) -> HostType:
        """Mix modules into target's singleton (class level)."""
        for module in reversed(modules):
            self._check_mixin(target, module, singleton=True)
            if module not in target.extends:
                target.extends.append(module)
        return target

    def def_method(
        self,
        target: HostType,
        name: str,
        visibility: Visibility = Visibility.PUBLIC
    ) -> HostType:
        """Define an instance method on target."""
        target.instance_methods[name] = Visibility(visibility)
        return target

    def def_singleton_method(
        self,
        target: HostType,
        name: str,
        visibility: Visibility = Visibility.PUBLIC
    ) -> HostType:
        """Define a class-level method on target (on its singleton)."""
        target.singleton_methods[name] = Visibility(visibility)
        return target

    def new(self, cls: HostType) -> HostObject:
        """Instantiate a class."""
        if cls.kind is not AncestorKind.CLASS:
            raise ObjectModelError(f"undefined method 'new' for module {cls.name}")
        return HostObject(cls)

    def __getitem__(self, name: str) -> HostType:
        return self._types[name]

    def __contains__(self, name: str) -> bool:
        return name in self._types

    # AncestorGraph

    def ancestors_of(self, type_) -> List:
        if isinstance(type_, SingletonClass):
            return self._singleton_lineage(type_.attached)
        return self._ancestors(type_)

    def directly_defined_methods(self, type_, level: Level, visibility: Visibility) -> Set[str]:
        if isinstance(type_, SingletonClass):
            if Level(level) is Level.CLASS:
                return set()
            table = type_.attached.singleton_methods
        elif Level(level) is Level.INSTANCE:
            table = type_.instance_methods
        else:
            table = type_.singleton_methods
        return {name for name, defined in table.items() if defined is Visibility(visibility)}

    def singleton_of(self, type_) -> SingletonClass:
        if not isinstance(type_, HostType):
            raise TypeError(f"{type_!r} has no singleton in this model")
        return type_.singleton

    def trivial_ancestors(self) -> List[HostType]:
        return self._ancestors(self.object)

    def trivial_singleton_ancestors(self) -> List[HostType]:
        return self._singleton_lineage(self.object)

    def kind_of(self, type_) -> AncestorKind:
        if isinstance(type_, SingletonClass):
            return AncestorKind.CLASS
        return type_.kind

    def name_of(self, type_) -> str:
        return type_.name

    def is_type(self, obj) -> bool:
        return isinstance(obj, (HostType, SingletonClass))

    def type_of(self, obj) -> HostType:
        if isinstance(obj, HostObject):
            return obj.cls
        if isinstance(obj, SingletonClass):
            return self.class_
        if isinstance(obj, HostType):
            return self.class_ if obj.kind is AncestorKind.CLASS else self.module
        raise TypeError(f"{obj!r} is not part of this object model")

    # Linearization

    def _ancestors(self, type_: HostType) -> List[HostType]:
        inherited = self._ancestors(type_.superclass) if type_.superclass else []
        return [type_] + self._mixin_chain(type_.includes, inherited) + inherited

    def _singleton_lineage(self, type_: HostType) -> List[HostType]:
        if type_.kind is AncestorKind.MODULE:
            tail = self._ancestors(self.module)
        elif type_.superclass is None:
            tail = self._ancestors(self.class_)
        else:
            tail = self._singleton_lineage(type_.superclass)
        return self._mixin_chain(type_.extends, tail) + tail

    def _mixin_chain(self, mixins: Sequence[HostType], inherited: Sequence[HostType]) -> List[HostType]:
        """
        Modules placed between a type and its inherited ancestors.

        Each later mixin goes in front of earlier ones; modules already
        present further up are not inserted again.
        """
        inserted: List[HostType] = []
        for module in mixins:
            block = [
                ancestor for ancestor in self._ancestors(module)
                if ancestor not in inherited and ancestor not in inserted
            ]
            inserted = block + inserted
        return inserted

    # Internals

    def _register(self, type_: HostType) -> HostType:
        if type_.name in self._types:
            raise ObjectModelError(f"{type_.name} is already defined")
        self._types[type_.name] = type_
        logger.debug(f"Defined {type_!r}")
        return type_

    def _check_mixin(self, target: HostType, module: HostType, singleton: bool = False) -> None:
        if module.kind is not AncestorKind.MODULE:
            raise ObjectModelError(f"wrong argument type {module.name} (expected module)")
        if not singleton and target in self._ancestors(module):
            raise ObjectModelError(f"cyclic include detected ({module.name} into {target.name})")

    def _define_builtin_methods(self) -> None:
        for name in ("==", "!", "!=", "equal?", "instance_eval", "__send__", "__id__"):
            self.def_method(self.basic_object, name)
        for name in ("initialize", "method_missing", "singleton_method_added"):
            self.def_method(self.basic_object, name, Visibility.PRIVATE)

        for name in ("class", "dup", "freeze", "frozen?", "hash", "inspect", "is_a?",
                     "method", "methods", "respond_to?", "send", "to_s", "extend"):
            self.def_method(self.kernel, name)
        for name in ("puts", "print", "raise", "require", "lambda", "loop"):
            self.def_method(self.kernel, name, Visibility.PRIVATE)

        for name in ("ancestors", "include?", "instance_method", "instance_methods",
                     "method_defined?", "name", "public_instance_methods",
                     "protected_instance_methods", "private_instance_methods"):
            self.def_method(self.module, name)
        for name in ("alias_method", "attr_accessor", "attr_reader", "define_method",
                     "include", "private", "protected", "public", "included", "extended"):
            self.def_method(self.module, name, Visibility.PRIVATE)

        for name in ("allocate", "new", "superclass"):
            self.def_method(self.class_, name)
        self.def_method(self.class_, "inherited", Visibility.PRIVATE)
