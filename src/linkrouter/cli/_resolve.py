"""Handler import resolution — resolves ``"module:attribute"`` strings to handlers.

Used by ``linkrouter route`` to load handlers named on the command line.
"""

import importlib

from linkrouter.routing.handler import LinkHandler


def resolve_handler(import_string: str) -> LinkHandler:
    """Resolve an import string to a link handler instance.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"handler"`` (e.g. ``"myapp.links"`` resolves to
    ``myapp.links.handler``).

    Classes and factory functions are called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a link handler.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "handler"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if isinstance(obj, type) or (callable(obj) and not isinstance(obj, LinkHandler)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, LinkHandler):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a link handler"
        raise TypeError(msg)

    return obj
