# Custom exceptions for methodsuper

class MethodSuperError(Exception):
    """Base exception for all application-specific errors."""
    pass

class MissingContextError(MethodSuperError, ValueError):
    """Raised when super resolution is requested without a captured context."""
    def __init__(self, message: str = "method doesn't have a resolution context captured"):
        super().__init__(message)

class NoOverrideError(MethodSuperError, LookupError):
    """Raised when a walk reaches the end of the chain without a match."""
    def __init__(self, root, level, name: str, root_name: str = None):
        self.root = root
        self.level = level
        self.name = name
        self.root_name = root_name or getattr(root, "__name__", None) or str(root)
        level_value = getattr(level, "value", level)
        super().__init__(
            f"No further override of {level_value} method '{name}' in ancestors of {self.root_name}"
        )

class AmbiguousSingletonOriginError(MethodSuperError, AssertionError):
    """Raised if a singleton ancestor is attributed to two introducing ancestors."""
    def __init__(self, singleton_ancestor, first_owner, second_owner):
        self.singleton_ancestor = singleton_ancestor
        self.first_owner = first_owner
        self.second_owner = second_owner
        super().__init__(
            f"Singleton ancestor {singleton_ancestor!r} introduced by both "
            f"{first_owner!r} and {second_owner!r}"
        )

class TargetImportError(MethodSuperError):
    """Raised when a 'module:Class' target cannot be imported."""
    def __init__(self, target: str, message: str):
        self.target = target
        self.message = message
        super().__init__(f"Failed to import {target}: {message}")

class ConfigError(MethodSuperError):
    """Raised for configuration-related problems."""
    pass

class ObjectModelError(MethodSuperError, ValueError):
    """Raised for invalid class/module declarations in an object model."""
    pass
