"""
Source: [fieldcheck/schema/errors.py](fieldcheck/schema/errors.py)

There are two families of errors.

[`SchemaError`](#schemaerror) is raised when the rules themselves are malformed: an unknown type,
a dangling `equals` reference, a broken `range`, etc. It is raised once, while the rules are compiled,
and the schema is unusable until the rules are fixed.

[`Invalid`](#invalid) is raised when the data does not conform to a valid schema.
Validation is fail-fast: the first failing field (in schema order) aborts the check.

All errors are available right at the top-level:

```python
from fieldcheck import SchemaError, Invalid
```

Every error kind is a subclass, so callers that need differentiated handling catch the specific class:

```python
from fieldcheck import Validator, Invalid, RangeOutOfBounds

try:
    validator.validate(data)
except RangeOutOfBounds as e:
    ...  # out of range
except Invalid as e:
    ...  # anything else
```
"""


class BaseError(Exception):
    """ Base validation exception """

    @property
    def kind(self):
        """ Error kind: the name of the error class """
        return type(self).__name__


class SchemaError(BaseError):
    """ Schema error (e.g. malformed)

    :param message: Error message
    :type message: str
    :param path: Name of the rule that failed to compile, e.g. 'scope.children.name'
    :type path: str|None
    """

    def __init__(self, message, path=None):
        super(SchemaError, self).__init__(message)
        self.message = message
        self.path = path

    def __repr__(self):
        return '{cls}({0.message!r}, path={0.path!r})'.format(self, cls=type(self).__name__)

    def __str__(self):
        return self.message


class InvalidType(SchemaError):
    """ Unknown type tag, or a rule that is neither a type name nor a mapping """


class InvalidEquals(SchemaError):
    """ `equals` refers to a missing, non-required or differently-typed sibling """


class InvalidMessage(SchemaError):
    """ `msg` is neither a string nor a message table """


class InvalidRange(SchemaError):
    """ `range` is not a pair of numbers """


class InvalidLength(SchemaError):
    """ `length` is neither a count nor a pair of counts """


class MissingChildren(SchemaError):
    """ `object` rule without children rules """


class Invalid(BaseError):
    """ Validation error for a single value.

    This exception is guaranteed to contain a message which is meaningful for the user:
    messages are rendered when the rules are compiled, with the field name already baked in.

    :param message: Validation error message.
    :type message: str
    :param expected: Expected value: the type tag, or the bounds the rule was expecting.
    :type expected: str|None
    :param provided: Provided value: info about the value that was actually supplied by the user
    :type provided: str|None
    :param path: Path to the error value.

        E.g. if an invalid value was encountered at data['scope']['name'], then path=['scope', 'name'].

    :type path: list
    :param validator: The rule that has failed
    :type validator: fieldcheck.schema.compiler.Rule|None
    :param info: Custom values that might be provided by the validator.
    :type info: dict
    """

    def __init__(self, message, expected=None, provided=None, path=None, validator=None, **info):
        super(Invalid, self).__init__(message, expected, provided, path, validator)
        self.message = message
        self.expected = expected
        self.provided = provided
        self.path = path or []
        self.validator = validator
        self.info = info

    @property
    def field(self):
        """ Dotted path to the failed field, e.g. 'scope.name'

        :rtype: str
        """
        return '.'.join(str(p) for p in self.path)

    def __repr__(self):
        return '{cls}({0.message!r}, ' \
               'expected={0.expected!r}, ' \
               'provided={0.provided!r}, ' \
               'path={0.path!r}, ' \
               'info={0.info!r})' \
            .format(self, cls=type(self).__name__,)

    def __str__(self):
        return self.message

    def enrich(self, expected=None, provided=None, path=None, validator=None):
        """ Enrich this error with additional information.

        The specified arguments are only set on the error if it does not have any value on the property.

        One exclusion is `path`: if provided, it is prepended to `Invalid.path`.
        This is useful when validating a part of the input with a separate validator:

        ```python
        from fieldcheck import Validator, Invalid

        address = Validator({'city': {'type': 'string', 'required': True}})

        try:
            address.validate(data['user']['address'])
        except Invalid as e:
            e.enrich(path=['user', 'address'])  # Make the path reflect the reality
            raise  # re-raise the error with updated fields
        ```

        Note that the message is left untouched.

        :param expected: Invalid.expected default
        :type expected: str|None
        :param provided: Invalid.provided default
        :type provided: str|None
        :param path: Prefix to prepend to Invalid.path
        :type path: list|None
        :param validator: Invalid.validator default
        :rtype: Invalid
        """
        if self.expected is None and expected is not None:
            self.expected = expected
        if self.provided is None and provided is not None:
            self.provided = provided
        if self.validator is None and validator is not None:
            self.validator = validator
        self.path = list(path or []) + self.path
        return self


class Required(Invalid):
    """ A required field was not provided """


class TypeMismatch(Invalid):
    """ The value does not have the declared type or format """


class EqualsMismatch(Invalid):
    """ The value differs from the field it must be equal to """


class LengthOutOfBounds(Invalid):
    """ String or array length is out of bounds """


class RangeOutOfBounds(Invalid):
    """ Number is out of range """
