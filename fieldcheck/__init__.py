""" Simple friendly validator for records of data.

Core features:

* Declarative: rules are plain dicts, with type-name shorthands
* 19 built-in types: from strings and numbers to e-mails, URLs, IP addresses, ISBNs, colors and Data URIs
* Strict and non-strict modes for the types that have ambiguous inputs
* Length and range constraints, equality with another field
* Nested objects, with error messages that name the exact field: 'scope.name'
* User-friendly error messages out of the box, all of them customizable
* Rules are compiled once: malformed rules are reported right away, and validation does no extra work

```python
from fieldcheck import Validator

validator = Validator({
    'name': {'type': 'string', 'required': True, 'length': [3, 18]},
    'email': {'type': 'email', 'strict': True},
    'password': {'type': 'string', 'required': True, 'length': [8, 18]},
    'confirm_password': {'type': 'string', 'equals': 'password'},
})

validator.validate(data)  # raises Invalid on the first wrong field
clean = validator.filter(data)  # only keeps the declared fields
```
"""
# Core

from .schema.errors import BaseError, SchemaError, Invalid
from .schema.errors import InvalidType, InvalidEquals, InvalidMessage, InvalidRange, InvalidLength, MissingChildren
from .schema.errors import Required, TypeMismatch, EqualsMismatch, LengthOutOfBounds, RangeOutOfBounds

from .schema import Validator
from .schema.compiler import compile_rules, Rules, Rule, Messages
from .schema.engine import validate, filter

from .schema.const import TYPE, TYPES
