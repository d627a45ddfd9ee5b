from collections.abc import Mapping

from .base import ValidatorBase


class Type(ValidatorBase):
    """ Check if the value has the specific type with `isinstance()` check.

    ```python
    from fieldcheck.validators import Type

    Type(list, tuple)([1, 2])  #-> True
    Type(list, tuple)('1, 2')  #-> False
    ```

    :param types: The type to check instances against.

        If multiple types are provided, then any of them is acceptable.

    :type types: list[type]
    """

    def __init__(self, *types, **kwargs):
        super(Type, self).__init__(**kwargs)
        self.types = types

    def __call__(self, v):
        return isinstance(v, self.types)


class String(Type):
    """ A `str` value """

    name = 'string'

    def __init__(self, strict=False):
        super(String, self).__init__(str, strict=strict)


class Object(Type):
    """ A structural object: any mapping """

    name = 'object'

    def __init__(self, strict=False):
        super(Object, self).__init__(Mapping, strict=strict)


class Array(Type):
    """ An ordered sequence: a list or a tuple.

    Strings are sequences too, but they're not arrays.
    """

    name = 'array'

    def __init__(self, strict=False):
        super(Array, self).__init__(list, tuple, strict=strict)


__all__ = ('Type', 'String', 'Object', 'Array',)
