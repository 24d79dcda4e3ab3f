"""
CLI Command Modules

Each module contains a logical group of related commands.
"""

from methodsuper.cli import chains

__all__ = ['chains']
