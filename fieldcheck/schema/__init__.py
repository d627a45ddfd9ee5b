import logging

from .compiler import compile_rules, Rules, Rule, Messages
from .engine import validate, filter
from .errors import Invalid

logger = logging.getLogger(__name__)


class Validator(object):
    """ Validator for records of data.

    A validator is created from a set of rules: a mapping of field names to either a type name,
    or a rule with options:

    ```python
    from fieldcheck import Validator

    validator = Validator({
        'name': {
            'type': 'string',
            'required': True,
            'length': [3, 18],
        },
        'age': {
            'type': 'number',
            'range': [0, 120],
        },
        'email': 'email',
    })

    validator.validate({'name': 'Ayon Lee', 'age': 30})  # okay
    validator.validate({'name': 'Al', 'age': 30})
    #-> LengthOutOfBounds: 'name' must contain at least 3 and at most 18 characters.
    ```

    When a Validator is created, the rules are compiled, hence they do not need to be analyzed every time.
    Malformed rules raise [`SchemaError`](#schemaerror) right away.

    The following options are supported by a rule:

    1. **`type`**: the type of the field. One of:

        * `string`, `number`, `boolean`, `object`, `array`
        * `email`, `url`, `ipv4`, `ipv6`, `mac`, `uuid`, `isbn`, `color`
        * `date`, `time`
        * `ascii`, `base64`, `json`, `data-uri`

        A type name alone is a shorthand for a rule with just the type: `'email'` is `{'type': 'email'}`.

    2. **`required`**: the field has to be provided. A missing key or `None` is "not provided".

        Optional fields that are not provided are not checked at all.

    3. **`strict`**: narrows the set of acceptable values.

        * `number` is strict by default. Non-strict mode also accepts numeric strings: `'100'`.
        * `boolean`: non-strict mode also accepts `1` and `0`
        * `email`: strict mode rejects 'localhost' and non-ASCII addresses
        * `url`: strict mode rejects 'localhost' and URLs that are not in their canonical form
        * `ipv4`: strict mode rejects private and reserved addresses
        * `isbn`: strict mode requires the hyphenated form

    4. **`length`**: for `string`, `email`, `url`, `ascii`, `base64`, `json`, `data-uri` and `array`:
        an exact length, or a `[min, max]` list.

    5. **`range`**: for `number`: a `[min, max]` list. Both ends are inclusive.

    6. **`equals`**: name of another field this field has to be equal to, e.g. a password confirmation.

        The other field has to be declared in the same scope, be `required`, and have the same type.

    7. **`msg`**: custom error messages: a string that is used for every failure,
        or a dict with any of the keys: `type`, `required`, `equals`, `length`, `range`.

    8. **`children`**: for `object`: rules for the fields of the nested object.

        ```python
        validator = Validator({
            'scope': {
                'type': 'object',
                'children': {
                    'name': {'type': 'string', 'required': True},
                },
            },
        })

        validator.validate({'scope': {}})
        #-> Required: 'scope.name' must be provided.
        ```

    :param rules: Rules definition
    :type rules: Mapping
    :raises SchemaError: Schema compilation error
    """

    def __init__(self, rules):
        #: Compiled rules
        self.rules = compile_rules(rules)

    def __repr__(self):
        return '{cls}({rules!r})'.format(cls=type(self).__name__, rules=self.rules)

    def update(self, rules):
        """ Replace the rules.

        The new rules are compiled first, and swapped in as a whole afterwards:
        concurrent validations see either the old rules, or the new ones.
        If the new rules are malformed, the old ones are kept.

        :param rules: Rules definition
        :type rules: Mapping
        :rtype: Validator
        :raises SchemaError: Schema compilation error
        """
        compiled = compile_rules(rules)
        self.rules = compiled
        logger.debug('Rules replaced: %d field(s)', len(compiled))
        return self

    def filter(self, data):
        """ Filter the input data according to the rules. Values are not validated.

        ```python
        validator = Validator({'name': 'string', 'score': 'number'})
        validator.filter({'name': 'Ayon Lee', 'score': 80, 'color': 'yellow'})
        #-> {'name': 'Ayon Lee', 'score': 80}
        ```

        :param data: Input data
        :type data: Mapping
        :rtype: dict
        """
        return filter(self.rules, data)

    def validate(self, data):
        """ Check that the input data is valid.

        :param data: Input data
        :type data: Mapping
        :raises fieldcheck.Invalid: Validation error for the first failing field. See [`Invalid`](#invalid).
        """
        rules = self.rules  # the same rules for the whole check, even if replaced meanwhile
        validate(rules, data)

    def check(self, data):
        """ An alias of `validate()` """
        return self.validate(data)

    def is_valid(self, data):
        """ Test whether the input data is valid, without raising errors

        :rtype: bool
        """
        try:
            self.validate(data)
        except Invalid:
            return False
        return True
