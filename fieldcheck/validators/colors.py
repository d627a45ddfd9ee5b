import re

import webcolors

from .base import ValidatorBase


class Color(ValidatorBase):
    """ Validate a CSS color.

    These forms are accepted:

    * A color name: 'red', 'blue', 'rebeccapurple', ...
    * A hex color with 3, 4, 6 or 8 digits: '#fff', '#ffff', '#ffffff', '#ffffffff'
    * An RGB color: 'rgb(125, 125, 125)', every channel within 0..255
    * An RGBA color: 'rgba(125, 125, 125, 0.5)', the alpha channel within 0..1

    ```python
    from fieldcheck.validators import Color

    Color()('red')  #-> True
    Color()('#FFF')  #-> True
    Color()('rgb(256,0,0)')  #-> False
    Color()('rgba(0,0,0,2)')  #-> False
    ```
    """

    name = 'color'

    _hex_rex = re.compile(r'#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})', re.IGNORECASE)
    _rgb_rex = re.compile(r'rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)')
    _rgba_rex = re.compile(r'rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+(?:\.\d+)?|\.\d+)\s*\)')

    @classmethod
    def is_color_name(cls, v):
        """ Test that the string is a known CSS color name """
        try:
            webcolors.name_to_hex(v)
        except ValueError:
            return False
        return True

    def __call__(self, v):
        if not isinstance(v, str):
            return False
        if self._hex_rex.fullmatch(v):
            return True

        match = self._rgb_rex.fullmatch(v) or self._rgba_rex.fullmatch(v)
        if match:
            channels = match.groups()
            if not all(0 <= int(c) <= 255 for c in channels[:3]):
                return False
            return len(channels) == 3 or 0 <= float(channels[3]) <= 1

        return self.is_color_name(v)


__all__ = ('Color',)
