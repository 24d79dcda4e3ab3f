"""
Common CLI helpers shared by command modules.
"""

import importlib
from typing import Any

import typer

from methodsuper.exceptions import TargetImportError
from methodsuper.logging_config import logger
from .config import CLIConfig
from .output import print_error


def load_target(target: str) -> Any:
    """
    Import the object named by a 'package.module:Attr.Path' target.

    Args:
        target: Module path and attribute path joined by ':'

    Returns:
        The imported object

    Raises:
        TargetImportError: If the module or attribute cannot be found
    """
    module_path, sep, attr_path = target.partition(CLIConfig.TARGET_SEPARATOR)
    if not sep or not module_path or not attr_path:
        raise TargetImportError(target, "expected 'package.module:Attribute'")

    try:
        obj = importlib.import_module(module_path)
    except ImportError as e:
        raise TargetImportError(target, str(e)) from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetImportError(target, f"no attribute '{part}'") from e

    logger.debug(f"Loaded target {target}: {obj!r}")
    return obj


def load_class_or_exit(target: str) -> type:
    """
    Load a class target or exit with an error message.

    Raises:
        typer.Exit: If the target is missing or not a class
    """
    try:
        obj = load_target(target)
    except TargetImportError as e:
        print_error(str(e), code="TARGET_NOT_FOUND", input_value=target)
        raise typer.Exit(code=1)

    if not isinstance(obj, type):
        print_error(f"{target} is not a class", code="NOT_A_CLASS", input_value=target)
        raise typer.Exit(code=1)
    return obj
