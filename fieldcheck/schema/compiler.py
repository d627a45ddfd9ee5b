import logging
from collections import namedtuple
from collections.abc import Mapping

from . import const
from .const import TYPE, MSG
from .errors import SchemaError, InvalidType, InvalidEquals, InvalidMessage, InvalidRange, InvalidLength, \
    MissingChildren
from .util import is_number, field_name, schema_name

logger = logging.getLogger(__name__)


class Messages(namedtuple('Messages', const.MSG_KEYS)):
    """ Message table of a rule: one ready-to-display message per failure kind, or `None`.

    :param type: Wrong type or format
    :param required: Required field not provided
    :param equals: Not equal to the referenced field
    :param length: Length out of bounds
    :param range: Number out of range
    """

    __slots__ = ()

    def as_dict(self):
        """ Get the messages as a dict, leaving out the unset ones

        :rtype: dict
        """
        return {k: v for k, v in zip(self._fields, self) if v is not None}


class Rule(namedtuple('Rule', ('type', 'required', 'strict', 'length', 'range', 'equals', 'msg', 'children', 'path'))):
    """ Compiled rule of a single field.

    Rules are immutable: they're created by [`compile_rules()`](#compile_rules) and are never modified afterwards,
    which makes them safe to share.

    :param type: Type tag, one of `const.TYPES`
    :type type: str
    :param required: Whether the field has to be provided
    :type required: bool
    :param strict: Strict mode, or `None` for types that don't have a default strict mode
    :type strict: bool|None
    :param length: Exact length, or the (min, max) length range
    :type length: int|tuple|None
    :param range: The (min, max) range of a number
    :type range: tuple|None
    :param equals: Name of the sibling field this field should be equal to
    :type equals: str|None
    :param msg: Messages
    :type msg: Messages
    :param children: Rules of an object's fields
    :type children: Rules|None
    :param path: Path to the field from the top-level: ('scope', 'name')
    :type path: tuple
    """

    __slots__ = ()

    @property
    def name(self):
        """ Dotted name of the field: 'scope.name' """
        return field_name(self.path)

    def as_dict(self):
        """ Get the rule as a plain dict, leaving out the unset attributes

        :rtype: dict
        """
        d = {'type': self.type, 'required': self.required}
        for key in ('strict', 'length', 'range', 'equals'):
            value = getattr(self, key)
            if value is not None:
                d[key] = value
        d['msg'] = self.msg.as_dict()
        if self.children is not None:
            d['children'] = self.children.as_dict()
        return d


class Rules(Mapping):
    """ Compiled schema: an immutable mapping of field names to [`Rule`](#rule)s.

    Compare it with plain dicts using `as_dict()`:

    ```python
    from fieldcheck import compile_rules

    compile_rules({'name': 'string'}).as_dict()
    #-> {'name': {'type': 'string', 'required': False, 'msg': {'type': "'name' must be a valid string."}}}
    ```

    :param rules: Compiled rules
    :type rules: dict[str, Rule]
    """

    def __init__(self, rules):
        self._rules = dict(rules)

    def __getitem__(self, field):
        return self._rules[field]

    def __iter__(self):
        return iter(self._rules)

    def __len__(self):
        return len(self._rules)

    def __hash__(self):
        return hash(tuple(self._rules.items()))

    def __repr__(self):
        return '{cls}({rules!r})'.format(cls=type(self).__name__, rules=self._rules)

    def as_dict(self):
        """ Get the compiled schema as a plain dict

        :rtype: dict
        """
        return {field: rule.as_dict() for field, rule in self._rules.items()}


class RuleCompiler(object):
    """ Compiles the raw rule of a single field.

    :param field: Name of the field
    :type field: str
    :param rule: Raw rule: a type name, or a mapping
    :type rule: str|Mapping
    :param siblings: Raw rules of the same scope, to resolve `equals`
    :type siblings: Mapping
    :param path: Path to the scope, ('scope',)
    :type path: tuple
    """

    def __init__(self, field, rule, siblings, path=()):
        self.siblings = siblings
        self.path = tuple(path) + (field,)

        #: Dotted field name, as the user sees it: 'scope.name'
        self.name = field_name(self.path)
        #: Name of the rule within the schema: 'scope.children.name'
        self.schema_name = schema_name(self.path)

        # Shorthand: 'email' is { 'type': 'email' }
        self.rule = self.expand(rule)

    @staticmethod
    def expand(rule):
        """ Expand the shorthand rule into a mapping

        :rtype: Mapping
        """
        if isinstance(rule, str):
            return {'type': rule}
        return rule

    #region Compilation Procedure

    def compile(self):
        """ Compile the rule.

        :rtype: Rule
        :raises SchemaError: Schema compilation error
        """
        type_name = self._compile_type()
        equals = self._compile_equals(type_name)
        msg = self._check_messages()

        strict = self.rule.get('strict')
        strict = const.STRICTS.get(type_name) if strict is None else bool(strict)
        required = bool(self.rule.get('required', False))

        length = self._compile_length()
        range = self._compile_range()

        return Rule(
            type=type_name,
            required=required,
            strict=strict,
            length=length,
            range=range,
            equals=equals,
            msg=self._compile_messages(msg, type_name, required, strict, length, range, equals),
            children=self._compile_children(type_name),
            path=self.path,
        )

    def _compile_type(self):
        """ Check the type tag """
        type_name = self.rule.get('type') if isinstance(self.rule, Mapping) else self.rule
        if type_name not in const.TYPES:
            raise InvalidType("type '{}' of '{}' is invalid.".format(type_name, self.schema_name), self.schema_name)
        return type_name

    def _compile_equals(self, type_name):
        """ Check that the referenced sibling exists, is required, and has the same type """
        equals = self.rule.get('equals')
        if equals is None:
            return None

        sibling = self.siblings.get(equals) if isinstance(equals, str) else None
        sibling = self.expand(sibling)
        if not isinstance(sibling, Mapping) \
                or not sibling.get('required') \
                or sibling.get('type') != type_name:
            other = schema_name(self.path[:-1] + (str(equals),))
            raise InvalidEquals(
                "comparing field '{}' must be defined with type '{}' and is required.".format(other, type_name),
                self.schema_name)
        return equals

    def _compile_length(self):
        """ Normalize `length`: a count, or a (min, max) pair """
        length = self.rule.get('length')
        if length is None:
            return None

        pair = isinstance(length, (list, tuple))
        counts = tuple(length) if pair else (length,)
        if (pair and len(counts) != 2) \
                or not all(isinstance(n, int) and not isinstance(n, bool) and n >= 0 for n in counts):
            raise InvalidLength(
                "'{}.length' must be a non-negative integer or a list that contains only 2 integers."
                .format(self.schema_name), self.schema_name)
        return counts if pair else length

    def _compile_range(self):
        """ Normalize `range`: a (min, max) pair. A bare number is not a range. """
        range = self.rule.get('range')
        if range is None:
            return None

        if not isinstance(range, (list, tuple)) or len(range) != 2 or not all(map(is_number, range)):
            raise InvalidRange(
                "'{}' must be a list that contains only 2 numbers.".format(self.schema_name),
                self.schema_name)
        return tuple(range)

    def _check_messages(self):
        """ Check `msg`: a single string, or a partial message table """
        msg = self.rule.get('msg')
        if msg is None or isinstance(msg, str):
            return msg

        if not isinstance(msg, Mapping) \
                or not set(msg).issubset(const.MSG_KEYS) \
                or not all(isinstance(m, str) for m in msg.values()):
            raise InvalidMessage("'{}.msg' must be a string or a dict.".format(self.schema_name), self.schema_name)
        return msg

    def _compile_messages(self, msg, type_name, required, strict, length, range, equals):
        """ Render the messages, with the field name baked in """
        # A single message for every failure
        if isinstance(msg, str):
            return Messages(
                type=msg,
                required=msg,
                equals=msg,
                length=msg if length is not None else None,
                range=msg if length is None and range is not None else None,
            )

        # Custom messages override the defaults
        msg = msg or {}
        defaults = dict(
            type=self._type_message(type_name, strict),
            required=MSG.REQUIRED % self.name if required else None,
            equals=MSG.EQUALS % (self.name, field_name(self.path[:-1] + (equals,))) if equals is not None else None,
            length=self._length_message(type_name, length) if length is not None else None,
            range=MSG.RANGE % (self.name, range[0], range[1]) if range is not None else None,
        )
        return Messages(**{k: msg.get(k) or default for k, default in defaults.items()})

    def _type_message(self, type_name, strict):
        template = MSG.TYPE.get(type_name)
        if template is None:
            return MSG.TYPE_GENERIC % (self.name, type_name)
        if isinstance(template, dict):
            template = template[bool(strict)]
        return template % self.name

    def _length_message(self, type_name, length):
        single, plural = MSG.ARRAY_UNITS if type_name == TYPE.ARRAY else MSG.UNITS
        if isinstance(length, tuple):
            return MSG.LENGTH_RANGE % (self.name, length[0], length[1], plural)
        return MSG.LENGTH % (self.name, length, single if length == 1 else plural)

    def _compile_children(self, type_name):
        """ Compile children rules of an object, recursively """
        if type_name != TYPE.OBJECT:
            return None

        children = self.rule.get('children')
        if not isinstance(children, Mapping) or not children:
            raise MissingChildren("'{}' must contain children rules.".format(self.schema_name), self.schema_name)
        return compile_rules(children, self.path)

    #endregion


def compile_rules(rules, path=()):
    """ Compile raw rules into [`Rules`](#rules).

    Every field gets an explicit type, `required` flag, `strict` flag (where applicable), and a full message table;
    objects get their children compiled recursively.

    ```python
    from fieldcheck import compile_rules

    rules = compile_rules({
        'name': {'type': 'string', 'required': True, 'length': [3, 18]},
        'age': {'type': 'number', 'range': [0, 120]},
        'email': 'email',
    })
    rules['name'].msg.length  #-> "'name' must contain at least 3 and at most 18 characters."
    ```

    Compilation is fail-fast: the first malformed rule raises an error, and nothing is returned.

    :param rules: Raw rules: { field: type-name | rule }
    :type rules: Mapping
    :param path: Path to the scope of these rules. Used for nested objects.
    :type path: tuple
    :rtype: Rules
    :raises SchemaError: Schema compilation error
    """
    if not isinstance(rules, Mapping):
        raise SchemaError('Rules must be a mapping, got {}'.format(type(rules).__name__))

    for field in rules:
        if not isinstance(field, str):
            raise SchemaError('Field names must be strings, got {!r}'.format(field), schema_name(path) or None)

    compiled = Rules(
        (field, RuleCompiler(field, rule, rules, path).compile())
        for field, rule in rules.items()
    )
    logger.debug('Compiled %d rule(s) in scope %r', len(compiled), field_name(path) or '<root>')
    return compiled
