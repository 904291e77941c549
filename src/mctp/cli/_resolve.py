"""Resolve ``"module:attribute"`` import strings to a ServerConfig."""

import importlib
import os
import sys

from mctp.config import ServerConfig


def resolve_config(import_string: str) -> ServerConfig:
    """Resolve an import string to a ``ServerConfig``.

    Accepts ``"module:attribute"``. When the attribute is omitted it
    defaults to ``"config"``. A callable that is not already a
    ``ServerConfig`` is treated as a factory and called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the result is not a ``ServerConfig``.
    """
    # Console scripts do not put the working directory on the import path.
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "config"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, ServerConfig):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, ServerConfig):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, expected ServerConfig"
        raise TypeError(msg)
    return obj
