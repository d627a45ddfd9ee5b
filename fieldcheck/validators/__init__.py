""" Format validators: one per type tag.

Each validator is a boolean oracle, configured with the `strict` flag of the rule:

```python
from fieldcheck.validators import get_validator

get_validator('email', strict=True)('user@localhost')  #-> False
```
"""

from .base import ValidatorBase
from .types import *
from .numbers import *
from .values import *
from .boolean import *
from .strings import *
from .network import *
from .dates import *
from .colors import *
from .isbn import *

from ..schema.const import TYPE


#: Validator class for every type tag
VALIDATORS = {
    TYPE.STRING: String,
    TYPE.NUMBER: Number,
    TYPE.BOOLEAN: Boolean,
    TYPE.OBJECT: Object,
    TYPE.ARRAY: Array,
    TYPE.EMAIL: Email,
    TYPE.URL: Url,
    TYPE.DATE: Date,
    TYPE.TIME: Time,
    TYPE.COLOR: Color,
    TYPE.IPV4: IPv4,
    TYPE.IPV6: IPv6,
    TYPE.MAC: Mac,
    TYPE.UUID: Uuid,
    TYPE.ISBN: Isbn,
    TYPE.ASCII: Ascii,
    TYPE.BASE64: Base64,
    TYPE.JSON: Json,
    TYPE.DATA_URI: DataUri,
}

# Validators are stateless once configured: share a strict and a non-strict instance of each
_instances = {(type_name, strict): cls(strict=strict)
              for type_name, cls in VALIDATORS.items()
              for strict in (False, True)}


def get_validator(type_name, strict=False):
    """ Get the validator for the type tag.

    :param type_name: Type tag
    :type type_name: str
    :param strict: Strict mode. `None` means the type has no strict mode.
    :type strict: bool|None
    :rtype: ValidatorBase
    :raises KeyError: unknown type
    """
    return _instances[type_name, bool(strict)]
