from stdnum import isbn
from stdnum.exceptions import ValidationError

from .base import ValidatorBase


def hyphenated_forms(number):
    """ Get the canonical hyphenated forms of a valid ISBN.

    ```python
    hyphenated_forms('1933988037')  #-> ('1-933988-03-7', '978-1-933988-03-0')
    ```

    Numbers with the 979 prefix have no ISBN-10 form: `None` is returned in its place.

    :param number: A valid ISBN-10 or ISBN-13, hyphenated or not
    :type number: str
    :return: (ISBN-10 form or None, ISBN-13 form)
    :rtype: (str|None, str)
    """
    number = isbn.compact(number)
    isbn13 = isbn.to_isbn13(number)
    try:
        isbn10 = isbn.format(isbn.to_isbn10(isbn13))
    except ValidationError:  # 979-prefixed numbers have no ISBN-10 form
        isbn10 = None
    return isbn10, isbn.format(isbn13)


class Isbn(ValidatorBase):
    """ Validate an ISBN-10 or ISBN-13 string, including its check digit.

    In strict mode, the ISBN should be written in its canonical hyphenated form.

    ```python
    from fieldcheck.validators import Isbn

    Isbn()('1933988037')  #-> True
    Isbn()('978-4-87311-336-4')  #-> True
    Isbn(strict=True)('978-4-87311-336-4')  #-> True
    Isbn(strict=True)('9784873113364')  #-> False
    ```
    """

    name = 'ISBN string'

    def __call__(self, v):
        if not isinstance(v, str):
            return False
        try:
            isbn.validate(v)
        except ValidationError:
            return False
        return not self.strict or v in hyphenated_forms(v)


__all__ = ('Isbn',)
