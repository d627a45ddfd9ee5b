from collections.abc import Sized

from .base import ValidatorBase


class Length(ValidatorBase):
    """ Validate that the provided collection has a certain length.

    Works for strings (characters are counted) and arrays (elements are counted).

    ```python
    from fieldcheck.validators import Length

    Length(3)('abc')  #-> True
    Length(2, 4)([1])  #-> False
    ```

    :param min: Exact length, or the minimal allowed length if `max` is given
    :type min: int
    :param max: Maximal allowed length, or `None` for an exact length check
    :type max: int|None
    """

    def __init__(self, min, max=None):
        super(Length, self).__init__()
        self.min = min
        self.max = min if max is None else max
        self.name = 'Length({min}..{max})'.format(min=self.min, max=self.max)

    @classmethod
    def from_rule(cls, length):
        """ Create from the `length` of a rule: an exact count, or a (min, max) pair

        :type length: int|tuple
        :rtype: Length
        """
        if isinstance(length, tuple):
            return cls(*length)
        return cls(length)

    def __call__(self, v):
        if not isinstance(v, Sized):
            return False
        return self.min <= len(v) <= self.max


__all__ = ('Length',)
