"""
Reflection adapter — implements the TypeIntrospector port with Python's own
runtime type system.

Type tags may be class objects or dotted names ("collections.abc.Sized",
"builtins.int", "pathlib.Path"). Names are resolved with importlib; a name
that does not resolve to a class makes every question about it answer
False rather than raise.

"Interfaces" in Python are abstract base classes and runtime-checkable
Protocols, so `implements` is an issubclass check against the resolved
class, with the class of an instance standing in for the instance.
"""

from __future__ import annotations

import importlib
from abc import ABCMeta
from typing import Any

import structlog

log = structlog.get_logger()


class PythonTypeIntrospector:
    """
    Answer type questions with isinstance / issubclass / getattr.

    Implements the TypeIntrospector port.
    """

    def resolve_class(self, type_tag: Any) -> type | None:
        if isinstance(type_tag, type):
            return type_tag
        if not isinstance(type_tag, str) or not type_tag:
            return None
        module_name, _, qualname = type_tag.rpartition(".")
        return self._import_class(module_name or "builtins", qualname)

    def is_instance(self, value: Any, type_tag: Any) -> bool:
        cls = self.resolve_class(type_tag)
        return cls is not None and isinstance(value, cls)

    def is_subclass(self, value: Any, type_tag: Any) -> bool:
        """
        True when ``value`` (a class, or a name resolving to one) derives from ``type_tag``.

        A class is not considered a subclass of itself.
        """
        cls = self.resolve_class(value)
        parent = self.resolve_class(type_tag)
        if cls is None or parent is None or cls is parent:
            return False
        try:
            return issubclass(cls, parent)
        except TypeError:
            # non-runtime-checkable Protocols refuse issubclass
            return False

    def is_interface(self, type_tag: Any) -> bool:
        """Abstract base classes and Protocols play the role of interfaces."""
        return isinstance(self.resolve_class(type_tag), ABCMeta)

    def implements(self, value: Any, interface_tag: Any) -> bool:
        """
        True when ``value`` (a class, a class name or an instance) satisfies an
        abstract base class or runtime-checkable Protocol.
        """
        if isinstance(value, str):
            cls = self.resolve_class(value)
        else:
            cls = value if isinstance(value, type) else type(value)
        if cls is None or not self.is_interface(interface_tag):
            return False
        interface = self.resolve_class(interface_tag)
        try:
            return issubclass(cls, interface)
        except TypeError:
            return False

    def has_attribute(self, value: Any, name: str) -> bool:
        target = self._target(value)
        if target is None:
            return False
        # declared-but-unset fields live only in the annotations
        return hasattr(target, name) or name in getattr(target, "__annotations__", {})

    def has_method(self, value: Any, name: str) -> bool:
        target = self._target(value)
        return target is not None and callable(getattr(target, name, None))

    def _target(self, value: Any) -> Any:
        # class names are looked up, anything else is inspected as given
        if isinstance(value, str):
            return self.resolve_class(value)
        return value

    def _import_class(self, module_name: str, qualname: str) -> type | None:
        try:
            obj: Any = importlib.import_module(module_name)
        except ImportError:
            # "outer.Inner" style tags: the module part may itself be a class path
            parent_module, _, parent_name = module_name.rpartition(".")
            if not parent_name:
                return None
            outer = self._import_class(parent_module or "builtins", parent_name)
            if outer is None:
                return None
            obj = outer
        for part in qualname.split("."):
            obj = getattr(obj, part, None)
            if obj is None:
                log.debug("introspection.unresolved", module=module_name, name=qualname)
                return None
        return obj if isinstance(obj, type) else None
