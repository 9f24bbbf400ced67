"""
Ports — Protocol-based interfaces for the platform collaborators.

The predicate catalog is pure: it decides pass/fail and formats the
message. Questions it cannot answer by looking at the value alone go
through a port:

  Catalog ← Ports (protocols) ← Adapters (implementations)

  - TypeIntrospector  → class / instance / attribute relationships
  - FileSystemProbe   → path existence and permissions

Each port is a Protocol (structural typing) so adapters, and test
doubles, satisfy the contract simply by implementing the methods.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TypeIntrospector(Protocol):
    """
    Port: answer type-identity and membership questions.

    A ``type_tag`` is whatever the adapter understands as a type: a class
    object, or a name it can resolve to one. ``resolve_class`` returns
    None for a tag that names nothing.
    """

    def resolve_class(self, type_tag: Any) -> type | None: ...

    def is_instance(self, value: Any, type_tag: Any) -> bool: ...

    def is_subclass(self, value: Any, type_tag: Any) -> bool: ...

    def is_interface(self, type_tag: Any) -> bool: ...

    def implements(self, value: Any, interface_tag: Any) -> bool: ...

    def has_attribute(self, value: Any, name: str) -> bool: ...

    def has_method(self, value: Any, name: str) -> bool: ...


@runtime_checkable
class FileSystemProbe(Protocol):
    """Port: query the file system about a path. Never raises for missing paths."""

    def exists(self, path: Any) -> bool: ...

    def is_file(self, path: Any) -> bool: ...

    def is_dir(self, path: Any) -> bool: ...

    def is_readable(self, path: Any) -> bool: ...

    def is_writable(self, path: Any) -> bool: ...
