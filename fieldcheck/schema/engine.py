""" Validation engine: checks records against compiled [`Rules`](#rules), and filters them. """

import logging
from collections.abc import Mapping

from . import const
from .const import TYPE
from .errors import Required, TypeMismatch, EqualsMismatch, LengthOutOfBounds, RangeOutOfBounds
from .util import UNDEFINED, is_absent, get_type_name
from ..validators import get_validator, Length, Range

logger = logging.getLogger(__name__)


def _error(cls, rule, message, expected, provided, **info):
    """ Helper for Invalid errors: fills in the path and the failed rule

    :type cls: type
    :type rule: fieldcheck.schema.compiler.Rule
    :rtype: fieldcheck.Invalid
    """
    e = cls(message, expected, provided, list(rule.path), rule, **info)
    logger.debug('%s at %r: %s', e.kind, e.field, message)
    return e


def validate_field(rule, value, data):
    """ Validate a single provided value against its rule.

    :param rule: Compiled rule
    :type rule: fieldcheck.schema.compiler.Rule
    :param value: The value, not absent
    :param data: The record the value belongs to: used to resolve `equals`
    :type data: Mapping
    :raises Invalid: Validation error
    """
    # Type
    validator = get_validator(rule.type, rule.strict)
    if not validator(value):
        raise _error(TypeMismatch, rule, rule.msg.type, rule.type, get_type_name(type(value)))

    # Equality
    if rule.equals is not None:
        other = data.get(rule.equals)
        if value != other:
            raise _error(EqualsMismatch, rule, rule.msg.equals, repr(other), repr(value))

    # Length, range, or children
    if rule.length is not None and (rule.type == TYPE.ARRAY or rule.type in const.STRINGS):
        length = Length.from_rule(rule.length)
        if not length(value):
            raise _error(LengthOutOfBounds, rule, rule.msg.length, length.name, str(len(value)))
    elif rule.type == TYPE.NUMBER and rule.range is not None:
        range = Range(*rule.range)
        if not range(value):
            raise _error(RangeOutOfBounds, rule, rule.msg.range, range.name, str(value))
    elif rule.children is not None and isinstance(value, Mapping):
        validate(rule.children, value)


def validate(rules, data):
    """ Validate the record against the compiled rules.

    For every field declared in the rules, in order:

    1. Presence: a missing key or `None` is "not provided". Required fields fail, optional ones are skipped.
    2. Type and format
    3. Equality with another field
    4. Length of strings and arrays, range of numbers, or the children of an object

    The first failure raises an error: no further fields are checked.

    ```python
    from fieldcheck import compile_rules, validate

    rules = compile_rules({'name': {'type': 'string', 'required': True}})
    validate(rules, {'name': 'Ayon Lee'})  #-> ok
    validate(rules, {})
    #-> Required: 'name' must be provided.
    ```

    :param rules: Compiled rules
    :type rules: fieldcheck.schema.compiler.Rules
    :param data: The record to validate
    :type data: Mapping
    :raises Invalid: Validation error. See [`Invalid`](#invalid).
    :raises TypeError: `data` is not a mapping
    """
    if not isinstance(data, Mapping):
        raise TypeError('Data must be a mapping, got {}'.format(get_type_name(type(data))))

    for field, rule in rules.items():
        value = data.get(field, UNDEFINED)

        # Not provided
        if is_absent(value):
            if rule.required:
                raise _error(Required, rule, rule.msg.required, rule.type, get_type_name(type(value)))
            continue

        validate_field(rule, value, data)


def filter(rules, data):
    """ Filter the record: only keep the fields declared in the rules, recursively.

    Values are not validated. Declared fields that are missing from the record do not appear in the result.

    ```python
    from fieldcheck import compile_rules, filter

    rules = compile_rules({'name': 'string', 'score': 'number'})
    filter(rules, {'name': 'Ayon Lee', 'score': 80, 'color': 'yellow'})
    #-> {'name': 'Ayon Lee', 'score': 80}
    ```

    :param rules: Compiled rules
    :type rules: fieldcheck.schema.compiler.Rules
    :param data: The record to filter. Anything that is not a mapping is treated as an empty record.
    :type data: Mapping
    :rtype: dict
    """
    if not isinstance(data, Mapping):
        return {}

    filtered = {}
    for field, value in data.items():
        rule = rules.get(field)
        if rule is None:
            continue
        if rule.children is not None:
            filtered[field] = filter(rule.children, value)
        else:
            filtered[field] = value
    return filtered
