import json
import re
from urllib.parse import urlsplit, urlunsplit, quote

import idna

from .base import ValidatorBase
from ..schema.util import is_ascii


class Match(ValidatorBase):
    """ Validate the input string against a regular expression.

    The whole string should match: no leading or trailing characters are allowed.

    ```python
    from fieldcheck.validators import Match

    hex_number = Match(r'0x[A-F0-9]+', 'hex number')

    hex_number('0xDEADBEEF')  #-> True
    hex_number(' 0xDEADBEEF')  #-> False
    hex_number(0xDEADBEEF)  #-> False
    ```

    :param pattern: RegExp pattern to match with: a string, or a compiled pattern
    :type pattern: str|re.Pattern
    :param name: Textual representation of what's expected from the user
    :type name: str
    """

    def __init__(self, pattern, name=None, strict=False):
        super(Match, self).__init__(strict)
        self.rex = re.compile(pattern)  # accepts compiled patterns as well
        self.name = name or '(special format)'

    def match(self, v):
        """ Match the value.

        :return: Match object, or `None` if the value is not a string or does not match
        """
        if not isinstance(v, str):
            return None
        return self.rex.fullmatch(v)

    def __call__(self, v):
        return self.match(v) is not None


class MatchAny(Match):
    """ Validate the input string against several regular expressions: any of them should match.

    :param patterns: RegExp patterns to try, in order
    :type patterns: list[str|re.Pattern]
    """

    def __init__(self, patterns, name=None, strict=False):
        super(MatchAny, self).__init__(patterns[0], name, strict)
        self.rexes = tuple(re.compile(p) for p in patterns)

    def match(self, v):
        if not isinstance(v, str):
            return None
        for rex in self.rexes:
            m = rex.fullmatch(v)
            if m:
                return m
        return None


class Email(Match):
    """ Validate that a value is an e-mail address.

    This is a permissive check: some non-space characters, the '@' sign, and a domain which has a dot in it,
    or is 'localhost'.

    In strict mode, 'localhost' is rejected, as well as any address with non-ASCII characters.

    ```python
    from fieldcheck.validators import Email

    Email()('user@example.com')  #-> True
    Email()('user@localhost')  #-> True
    Email(strict=True)('user@localhost')  #-> False
    Email(strict=True)('user@example.中国')  #-> False
    ```
    """

    _rex = re.compile(r'\S+@(\S+\.\S+|localhost)', re.IGNORECASE)

    def __init__(self, strict=False):
        super(Email, self).__init__(self._rex, 'email', strict)

    def __call__(self, v):
        match = self.match(v)
        if match is None:
            return False
        if self.strict:
            return match.group(1).lower() != 'localhost' and is_ascii(v)
        return True


class Url(Match):
    """ Validate a URL: it should have a protocol (`http://`) or be protocol-relative (`//`),
    followed by a dotted host name or 'localhost'.

    In strict mode, 'localhost' is rejected, and the URL has to be in its canonical form:
    parsing and re-assembling it should give the very same string, optionally with a trailing '/'.
    Protocol-relative URLs are considered to be 'http:'.

    ```python
    from fieldcheck.validators import Url

    Url()('//example.com')  #-> True
    Url()('http://example.中国')  #-> True
    Url(strict=True)('http://example.中国')  #-> False: not canonical, the host is not IDNA-encoded
    Url(strict=True)('http://localhost')  #-> False
    ```
    """

    _rex = re.compile(r'([a-z]+://|//)(\S+\.\S+|localhost)[/?\S]*', re.IGNORECASE)

    #: Characters that are left as is when a URL is re-assembled
    _safe_chars = "/%:@!$&'()*+,;=~-._?[]"

    def __init__(self, strict=False):
        super(Url, self).__init__(self._rex, 'URL', strict)

    @classmethod
    def canonical(cls, url):
        """ Parse and re-assemble the URL into its canonical form.

        The scheme and host are lower-cased, the host is IDNA-encoded, an empty path becomes '/',
        and unsafe characters are percent-encoded.

        :type url: str
        :return: (hostname, canonical URL)
        :rtype: (str|None, str)
        :raises ValueError: the URL can't be parsed
        """
        parts = urlsplit(url)
        hostname = parts.hostname
        netloc = parts.netloc

        if hostname:
            # Re-assemble the network location with the encoded host
            host = hostname
            if not host.isascii():
                host = idna.encode(host, uts46=True).decode('ascii')
            if ':' in host:
                host = '[{}]'.format(host)
            netloc = '{auth}{host}{port}'.format(
                auth=netloc.rpartition('@')[0] + '@' if '@' in netloc else '',
                host=host,
                port=':{}'.format(parts.port) if parts.port is not None else '',
            )

        return hostname, urlunsplit((
            parts.scheme.lower(),
            netloc,
            quote(parts.path, safe=cls._safe_chars) or ('/' if netloc else ''),
            quote(parts.query, safe=cls._safe_chars),
            quote(parts.fragment, safe=cls._safe_chars),
        ))

    def __call__(self, v):
        if self.match(v) is None:
            return False
        if not self.strict:
            return True

        url = 'http:' + v if v.startswith('//') else v
        try:
            hostname, href = self.canonical(url)
        except (ValueError, idna.IDNAError):
            return False

        return hostname != 'localhost' and href in (url, url + '/')


class Uuid(Match):
    """ A UUID string in its canonical 8-4-4-4-12 form, case-insensitive """

    _rex = re.compile(r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}', re.IGNORECASE)

    def __init__(self, strict=False):
        super(Uuid, self).__init__(self._rex, 'UUID string', strict)


class Ascii(ValidatorBase):
    """ A string without multi-byte characters """

    name = 'ASCII string'

    def __call__(self, v):
        return isinstance(v, str) and is_ascii(v)


class Base64(Match):
    """ A string of the base64 alphabet, with optional '=' padding """

    def __init__(self, strict=False):
        super(Base64, self).__init__(r'[A-Za-z0-9+/]+={0,2}', 'base64 string', strict)


class Json(ValidatorBase):
    """ A string that holds a JSON document.

    Non-standard constants (`NaN`, `Infinity`) are not JSON.

    ```python
    from fieldcheck.validators import Json

    Json()('{"hello": "world"}')  #-> True
    Json()('Not JSON')  #-> False
    ```
    """

    name = 'JSON string'

    @staticmethod
    def _reject_constant(name):
        raise ValueError('Not a JSON value: {}'.format(name))

    def __call__(self, v):
        if not isinstance(v, str):
            return False
        try:
            json.loads(v, parse_constant=self._reject_constant)
        except ValueError:  # json.JSONDecodeError is a ValueError
            return False
        return True


class DataUri(MatchAny):
    """ A Data URI string ([RFC 2397](https://tools.ietf.org/html/rfc2397)).

    These forms are accepted:

    * `data:<mediatype>[;<params>];base64,<payload>`
    * `data:<mediatype>[;<params>],<payload>`
    * `data:;base64,<payload>`
    * `data:,<payload>`
    """

    _rexes = (
        re.compile(r'data:[a-z0-9]+/[A-Za-z0-9\-+.;=]+;base64,[A-Za-z0-9+/]*={0,2}'),
        re.compile(r'data:[a-z0-9]+/[A-Za-z0-9\-+.;=]+,\S+', re.IGNORECASE),
        re.compile(r'data:;base64,[A-Za-z0-9+/]*={0,2}'),
        re.compile(r'data:,\S*'),
    )

    def __init__(self, strict=False):
        super(DataUri, self).__init__(self._rexes, 'Data URI string', strict)


__all__ = ('Match', 'MatchAny', 'Email', 'Url', 'Uuid', 'Ascii', 'Base64', 'Json', 'DataUri')
