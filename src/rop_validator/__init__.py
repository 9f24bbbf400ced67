"""
rop_validator — functional value validation on a Success/Failure railway.

A catalog of plain predicate functions (type, comparison, string,
collection, format, file-system, reflection and exception checks), each
``(value, *params, message='') -> Result``, lifted into composable
``Result -> Result`` steps with the combinators of the ``railway`` package.

    from railway import Success, bind, bind3, compose
    from rop_validator.catalog.types import string
    from rop_validator.catalog.strings import length_between

    validate = compose(bind(string), bind3(length_between, 2, 40))
    validate(Success.of("Ada"))   # → Success('Ada')

The Validator facade resolves predicates by name and adds the
null_or_* / all_* prefixes.
"""

from rop_validator.combinators import for_all, for_first, null_or
from rop_validator.config import ValidatorSettings
from rop_validator.registry import PREDICATES, UnknownPredicateError
from rop_validator.validator import Validator

__all__ = [
    "PREDICATES",
    "UnknownPredicateError",
    "Validator",
    "ValidatorSettings",
    "for_all",
    "for_first",
    "null_or",
]

__version__ = "0.1.0"
