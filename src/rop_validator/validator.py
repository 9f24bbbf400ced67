"""
Validator — the catalog facade.

One object, built once, that:
  - exposes every catalog predicate as an attribute (``v.min_length``)
    with its ports (introspector, file-system probe) already injected
  - turns a predicate name plus a fixed message into a pipeline step
    (``create``, ``create2``, ``create3``)
  - composes steps with the configured copy policy
  - answers the ``null_or_<check>`` and ``all_<check>`` prefixes
    (camelCase ``nullOrString`` / ``allString`` work too)

    v = Validator()
    validate_name = v.compose(
        v.create("string", "Name must be text, got %s"),
        v.create3("length_between", 2, 40),
    )
    validate_name(Success.of("Ada"))    # → Success('Ada')

The object holds no mutable state: settings and adapters are fixed at
construction, predicates are resolved from the static registry.
"""

from __future__ import annotations

import inspect
from functools import partial, wraps
from typing import Any

import structlog
from railway.binding import Step, bind, bind2, bind3, bind_n, compose
from railway.result import Result

from rop_validator import registry
from rop_validator.adapters.filesystem import LocalFileSystemProbe
from rop_validator.adapters.introspection import PythonTypeIntrospector
from rop_validator.combinators import for_all, for_first, null_or
from rop_validator.config import ValidatorSettings
from rop_validator.domain.ports import FileSystemProbe, TypeIntrospector
from rop_validator.registry import Predicate, UnknownPredicateError

log = structlog.get_logger()

_NULL_OR = "null_or_"
_ALL = "all_"


class Validator:
    """
    Catalog facade with injected ports and settings.

    Unknown attribute names are resolved as predicate names; anything the
    registry and the prefixes cannot resolve raises UnknownPredicateError.
    """

    bind = staticmethod(bind)
    bind2 = staticmethod(bind2)
    bind3 = staticmethod(bind3)
    bind_n = staticmethod(bind_n)

    def __init__(
        self,
        settings: ValidatorSettings | None = None,
        *,
        introspector: TypeIntrospector | None = None,
        probe: FileSystemProbe | None = None,
    ) -> None:
        self._settings = settings or ValidatorSettings()
        self._ports: dict[str, Any] = {
            "introspector": introspector or PythonTypeIntrospector(),
            "probe": probe or LocalFileSystemProbe(),
        }

    @property
    def settings(self) -> ValidatorSettings:
        return self._settings

    # ──────────────────────── Resolution ────────────────────────

    def predicate(self, name: str) -> Predicate:
        """
        Resolve ``name`` to a ready-to-call predicate.

        Prefixes nest: ``null_or_all_string`` accepts None or an iterable
        of strings.
        """
        key = registry.normalize(name)
        if registry.is_registered(key):
            return self._catalog_predicate(key)
        if key.startswith(_NULL_OR) and len(key) > len(_NULL_OR):
            return null_or(self.predicate(key[len(_NULL_OR):]))
        if key.startswith(_ALL) and len(key) > len(_ALL):
            wrapper = for_first if self._settings.all_mode == "first" else for_all
            return wrapper(self.predicate(key[len(_ALL):]))
        raise UnknownPredicateError(name)

    def _catalog_predicate(self, key: str) -> Predicate:
        fn = registry.resolve(key)
        parameters = inspect.signature(fn).parameters
        ports = {port: adapter for port, adapter in self._ports.items() if port in parameters}
        if ports:
            fn = partial(fn, **ports)
        if self._settings.log_failures:
            fn = _logged(key, fn)
        return fn

    def __getattr__(self, name: str) -> Predicate:
        # private and dunder lookups (copy, pickle, half-built instances) never hit the catalog
        if name.startswith("_"):
            raise AttributeError(name)
        return self.predicate(name)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(registry.names()))

    # ──────────────────────── Step factories ────────────────────────

    def create(self, name: str, message: str = "") -> Step:
        """
        A pipeline step checking ``name`` with a fixed ``message``.

            is_text = v.create("string", "Is not a string: %s")
            is_text(Success.of(123)).message()   # → 'Is not a string: integer'
        """
        return self.create_n(name, message=message)

    def create2(self, name: str, arg: Any, message: str = "") -> Step:
        """A step for a predicate taking one parameter, fixed here with the message."""
        return self.create_n(name, arg, message=message)

    def create3(self, name: str, arg1: Any, arg2: Any, message: str = "") -> Step:
        return self.create_n(name, arg1, arg2, message=message)

    def create_n(self, name: str, *args: Any, message: str = "") -> Step:
        step = bind_n(self.predicate(name), *args, message=message)
        log.debug("validator.created", predicate=name, params=len(args), custom_message=bool(message))
        return step

    def create_string(self, message: str = "") -> Step:
        return self.create("string", message)

    def compose(self, *steps: Step) -> Step:
        """``railway.compose`` with this validator's copy policy."""
        return compose(*steps, copy_policy=self._settings.copy_policy)


def _logged(name: str, fn: Predicate) -> Predicate:
    @wraps(fn)
    def check(*args: Any, **kwargs: Any) -> Result:
        return fn(*args, **kwargs).peek_failure(
            lambda err: log.debug(
                "validator.failure",
                predicate=name,
                code=err.code.value,
                message=err.message,
            )
        )

    return check
