"""
Reflection predicates — instance, class and member relationships.

Thin wrappers over the TypeIntrospector port, passed as the keyword-only
``introspector`` argument (defaulting to Python's own type system).

Type tags are class objects or dotted class names. Where the checked value
itself may name a class (is_a_of, subclass_of, implements_interface,
class_exists and the member checks), a ``str`` value is read as a class
name, not as a string instance.
"""

from __future__ import annotations

from typing import Any, Iterable

from railway.result import Result, Success
from railway.result_failures import ResultFailures

from rop_validator.adapters.introspection import PythonTypeIntrospector
from rop_validator.domain.ports import TypeIntrospector
from rop_validator.messages import report, type_to_string, value_to_string

_PYTHON = PythonTypeIntrospector()

__all__ = [
    "is_instance_of",
    "not_instance_of",
    "is_instance_of_any",
    "is_a_of",
    "is_not_a",
    "is_any_of",
    "subclass_of",
    "implements_interface",
    "class_exists",
    "interface_exists",
    "property_exists",
    "property_not_exists",
    "method_exists",
    "method_not_exists",
]


def _tag_name(tag: Any) -> str:
    if isinstance(tag, type):
        return f"{tag.__module__}.{tag.__qualname__}"
    return str(tag)


def _tag_names(tags: Iterable[Any]) -> str:
    return ", ".join(_tag_name(tag) for tag in tags)


def _is_a(value: Any, tag: Any, introspector: TypeIntrospector) -> bool:
    """``value`` is an instance of ``tag``, or is (names) ``tag`` or one of its subclasses."""
    if not isinstance(value, (str, type)):
        return introspector.is_instance(value, tag)
    cls = introspector.resolve_class(value)
    return cls is not None and (cls is introspector.resolve_class(tag) or introspector.is_subclass(cls, tag))


def is_instance_of(
    value: Any, class_: Any, message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    if not introspector.is_instance(value, class_):
        return ResultFailures.reflection_error(
            report(message, "Expected an instance of %2$s. Got: %s", type_to_string(value), _tag_name(class_))
        )
    return Success.of(value)


def not_instance_of(
    value: Any, class_: Any, message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    if introspector.is_instance(value, class_):
        return ResultFailures.reflection_error(
            report(
                message, "Expected an instance other than %2$s. Got: %s", type_to_string(value), _tag_name(class_)
            )
        )
    return Success.of(value)


def is_instance_of_any(
    value: Any, classes: Iterable[Any], message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    classes = list(classes)
    if not any(introspector.is_instance(value, tag) for tag in classes):
        return ResultFailures.reflection_error(
            report(
                message, "Expected an instance of any of %2$s. Got: %s", type_to_string(value), _tag_names(classes)
            )
        )
    return Success.of(value)


def is_a_of(
    value: Any, class_: Any, message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    """An instance of ``class_``, or ``class_`` itself, or one of its subclasses."""
    if not _is_a(value, class_, introspector):
        return ResultFailures.reflection_error(
            report(
                message,
                "Expected an instance of this class or to this class among its parents %2$s. Got: %s",
                value_to_string(value),
                _tag_name(class_),
            )
        )
    return Success.of(value)


def is_not_a(
    value: Any, class_: Any, message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    if _is_a(value, class_, introspector):
        return ResultFailures.reflection_error(
            report(
                message,
                "Expected an instance of this class or to this class among its parents other than %2$s. Got: %s",
                value_to_string(value),
                _tag_name(class_),
            )
        )
    return Success.of(value)


def is_any_of(
    value: Any, classes: Iterable[Any], message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    classes = list(classes)
    if not any(_is_a(value, tag, introspector) for tag in classes):
        return ResultFailures.reflection_error(
            report(
                message,
                "Expected an instance of any of this classes or any of those classes among their parents %2$s. Got: %s",
                value_to_string(value),
                _tag_names(classes),
            )
        )
    return Success.of(value)


def subclass_of(
    value: Any, class_: Any, message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    """A strict subclass; a class is not a subclass of itself."""
    if not introspector.is_subclass(value, class_):
        return ResultFailures.reflection_error(
            report(message, "Expected a sub-class of %2$s. Got: %s", value_to_string(value), _tag_name(class_))
        )
    return Success.of(value)


def implements_interface(
    value: Any, interface: Any, message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    if not introspector.implements(value, interface):
        return ResultFailures.reflection_error(
            report(
                message, "Expected an implementation of %2$s. Got: %s", value_to_string(value), _tag_name(interface)
            )
        )
    return Success.of(value)


def class_exists(value: Any, message: str = "", *, introspector: TypeIntrospector = _PYTHON) -> Result:
    if introspector.resolve_class(value) is None:
        return ResultFailures.reflection_error(
            report(message, "Expected an existing class name. Got: %s", value_to_string(value))
        )
    return Success.of(value)


def interface_exists(value: Any, message: str = "", *, introspector: TypeIntrospector = _PYTHON) -> Result:
    """A class name resolving to an abstract base class or Protocol."""
    if not introspector.is_interface(value):
        return ResultFailures.reflection_error(
            report(message, "Expected an existing interface name. Got: %s", value_to_string(value))
        )
    return Success.of(value)


def property_exists(
    value: Any, property_: str, message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    """A non-callable attribute (or declared field) named ``property_``."""
    if not (introspector.has_attribute(value, property_) and not introspector.has_method(value, property_)):
        return ResultFailures.reflection_error(
            report(message, "Expected the property %s to exist.", value_to_string(property_))
        )
    return Success.of(value)


def property_not_exists(
    value: Any, property_: str, message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    if introspector.has_attribute(value, property_) and not introspector.has_method(value, property_):
        return ResultFailures.reflection_error(
            report(message, "Expected the property %s to not exist.", value_to_string(property_))
        )
    return Success.of(value)


def method_exists(
    value: Any, method: str, message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    if not introspector.has_method(value, method):
        return ResultFailures.reflection_error(
            report(message, "Expected the method %s to exist.", value_to_string(method))
        )
    return Success.of(value)


def method_not_exists(
    value: Any, method: str, message: str = "", *, introspector: TypeIntrospector = _PYTHON
) -> Result:
    if introspector.has_method(value, method):
        return ResultFailures.reflection_error(
            report(message, "Expected the method %s to not exist.", value_to_string(method))
        )
    return Success.of(value)
