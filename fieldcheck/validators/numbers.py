import math
import re

from .base import ValidatorBase
from ..schema.util import is_number


_numeric_rex = re.compile(r'^\s*[-+]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|Infinity)\s*$')


def to_number(v):
    """ Get the numeric value of a number or a numeric string.

    ```python
    to_number(1)  #-> 1
    to_number(' -1.5e3 ')  #-> -1500.0
    to_number('Infinity')  #-> inf
    to_number('NaN')  #-> None
    to_number(True)  #-> None
    ```

    :param v: Input value
    :return: The number, or `None` if the value does not hold a number
    :rtype: int|float|None
    """
    if is_number(v):
        return v
    if isinstance(v, str) and _numeric_rex.match(v):
        return float(v.strip().replace('Infinity', 'inf'))
    return None


class Number(ValidatorBase):
    """ Validate a number.

    In strict mode, only `int` and `float` values are accepted (`bool` is not a number here).
    In non-strict mode, numeric strings are accepted as well.

    `NaN` is never a valid number.

    ```python
    from fieldcheck.validators import Number

    Number(strict=True)(100)  #-> True
    Number(strict=True)('100')  #-> False
    Number(strict=False)('100')  #-> True
    Number(strict=False)('NaN')  #-> False
    ```
    """

    name = 'number'

    def __init__(self, strict=True):
        super(Number, self).__init__(strict)

    def __call__(self, v):
        if self.strict and not is_number(v):
            return False

        number = to_number(v)
        return number is not None and not (isinstance(number, float) and math.isnan(number))


class Range(ValidatorBase):
    """ Validate that the value is within the defined range, inclusive.

    Numeric strings are compared by their value.

    ```python
    from fieldcheck.validators import Range

    Range(0, 120)(30)  #-> True
    Range(0, 120)('30')  #-> True
    Range(0, 120)(200)  #-> False
    ```

    :param min: Minimal allowed value
    :type min: int|float
    :param max: Maximal allowed value
    :type max: int|float
    """

    def __init__(self, min, max):
        super(Range, self).__init__()
        self.min = min
        self.max = max
        self.name = 'Range({min}..{max})'.format(min=min, max=max)

    def __call__(self, v):
        number = to_number(v)
        if number is None:
            return False
        return self.min <= number <= self.max


__all__ = ('Number', 'Range',)
