from .base import ValidatorBase


class Boolean(ValidatorBase):
    """ Validate a boolean value.

    The following values are supported:

    * `bool`: always
    * `1` and `0`: only in non-strict mode. Other truthy or falsy values are never accepted.

    ```python
    from fieldcheck.validators import Boolean

    Boolean()(True)  #-> True
    Boolean()(1)  #-> True
    Boolean()('true')  #-> False
    Boolean(strict=True)(1)  #-> False
    ```
    """

    name = 'boolean'

    def __call__(self, v):
        if isinstance(v, bool):
            return True
        if self.strict:
            return False
        return type(v) in (int, float) and v in (0, 1)


__all__ = ('Boolean',)
