"""
Pytest configuration for the methodsuper test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Object model fixtures mirroring common class/module layouts
- Resolver fixtures bound to those models
"""

import os

import pytest

from methodsuper.cli.config import CLIConfig
from methodsuper.hosts.object_model import ObjectModel
from methodsuper.logging_config import setup_logging
from methodsuper.resolution import SuperResolver, Visibility


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest for machine-mode operation."""
    os.environ.setdefault("METHODSUPER_MACHINE_MODE", "1")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False, force=True)
    CLIConfig.set_machine_mode(None)
    yield
    CLIConfig.set_machine_mode(None)


# ============================================================================
# OBJECT MODEL FIXTURES
# ============================================================================

@pytest.fixture
def model():
    """Empty object model with only the built-in types."""
    return ObjectModel()


@pytest.fixture
def inheritance_model(model):
    """
    Base/Derived hierarchy with an included and an extended module:

        module BaseIncludedModule; def module_meth; end; end
        module BaseExtendedModule; def module_meth; end; end

        class BaseClass
          include BaseIncludedModule
          extend BaseExtendedModule
          def self.singleton_meth; end
          def meth; end
        end

        class DerivedClass < BaseClass
          def self.singleton_meth; end
          def self.module_meth; end
          def meth; end
          def module_meth; end
        end
    """
    included = model.define_module("BaseIncludedModule")
    model.def_method(included, "module_meth")

    extended = model.define_module("BaseExtendedModule")
    model.def_method(extended, "module_meth")

    base = model.define_class("BaseClass")
    model.include(base, included)
    model.extend(base, extended)
    model.def_singleton_method(base, "singleton_meth")
    model.def_method(base, "meth")

    derived = model.define_class("DerivedClass", base)
    model.def_singleton_method(derived, "singleton_meth")
    model.def_singleton_method(derived, "module_meth")
    model.def_method(derived, "meth")
    model.def_method(derived, "module_meth")

    return model


@pytest.fixture
def resolver(inheritance_model):
    """SuperResolver over the Base/Derived hierarchy."""
    return SuperResolver(inheritance_model)


@pytest.fixture
def visibility_model(model):
    """
    Three-level hierarchy where the middle override is private:

        class Top;    def run; end; protected def check; end; end
        class Middle < Top; private def run; end; end
        class Bottom < Middle; def run; end; def check; end; end
    """
    top = model.define_class("Top")
    model.def_method(top, "run")
    model.def_method(top, "check", Visibility.PROTECTED)

    middle = model.define_class("Middle", top)
    model.def_method(middle, "run", Visibility.PRIVATE)

    bottom = model.define_class("Bottom", middle)
    model.def_method(bottom, "run")
    model.def_method(bottom, "check")

    return model
