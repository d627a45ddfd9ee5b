class TYPE:
    """ Type tags a rule can declare """

    STRING = 'string'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    OBJECT = 'object'  # carries children rules
    ARRAY = 'array'
    EMAIL = 'email'
    URL = 'url'
    DATE = 'date'
    TIME = 'time'
    COLOR = 'color'
    IPV4 = 'ipv4'
    IPV6 = 'ipv6'
    MAC = 'mac'
    UUID = 'uuid'
    ISBN = 'isbn'
    ASCII = 'ascii'
    BASE64 = 'base64'
    JSON = 'json'
    DATA_URI = 'data-uri'


#: String-like types: these support `length`
STRINGS = (
    TYPE.STRING,
    TYPE.EMAIL,
    TYPE.URL,
    TYPE.ASCII,
    TYPE.BASE64,
    TYPE.JSON,
    TYPE.DATA_URI,
)

#: All known types
TYPES = STRINGS + (
    TYPE.NUMBER,
    TYPE.BOOLEAN,
    TYPE.OBJECT,
    TYPE.ARRAY,
    TYPE.DATE,
    TYPE.TIME,
    TYPE.COLOR,
    TYPE.IPV4,
    TYPE.IPV6,
    TYPE.MAC,
    TYPE.UUID,
    TYPE.ISBN,
)

#: Types that get an explicit `strict` flag, and its default value
STRICTS = {
    TYPE.NUMBER: True,  # non-strict means a numeric string is treated as a number, too
    TYPE.BOOLEAN: False,
    TYPE.EMAIL: False,
    TYPE.URL: False,
    TYPE.IPV4: False,
    TYPE.ISBN: False,
}


class MSG:
    """ Default message templates.

    Every template receives the dotted field name as its first `%s` argument.
    """

    #: Type error templates.
    #: `number` and `ipv4` depend on the `strict` flag: {strict: template}
    TYPE = {
        TYPE.NUMBER: {
            True: "'%s' must be a valid number.",
            False: "'%s' must be a valid number or a numeric string.",
        },
        TYPE.BOOLEAN: "'%s' must be a valid boolean value.",
        TYPE.ARRAY: "'%s' must be an instance of Array.",
        TYPE.EMAIL: "'%s' must be a valid email address.",
        TYPE.URL: "'%s' must be a valid URL address.",
        TYPE.DATE: "'%s' must be an instance of Date or a valid date string.",
        TYPE.TIME: "'%s' must be a valid UNIX timestamp or time string.",
        TYPE.COLOR: "'%s' must be a valid color name, a hex, RGB or RGBA color string.",
        TYPE.IPV4: {
            False: "'%s' must be a valid IPv4 address.",
            True: "'%s' must be a valid, non-private and non-reserved IPv4 address.",
        },
        TYPE.IPV6: "'%s' must be a valid IPv6 address.",
        TYPE.MAC: "'%s' must be a valid MAC address.",
        TYPE.UUID: "'%s' must be a valid UUID string.",
        TYPE.ISBN: "'%s' must be a valid ISBN string.",
        TYPE.ASCII: "'%s' must be a valid ASCII string.",
        TYPE.BASE64: "'%s' must be a valid base64 string.",
        TYPE.JSON: "'%s' must be a valid JSON string.",
        TYPE.DATA_URI: "'%s' must be a valid Data URI string.",
    }

    #: Fallback for types without a specific template
    TYPE_GENERIC = "'%s' must be a valid %s."

    REQUIRED = "'%s' must be provided."
    EQUALS = "The value of '%s' must be the same as '%s'."

    #: Length templates: exact count, and (min, max)
    LENGTH = "'%s' must contain %d %s."
    LENGTH_RANGE = "'%s' must contain at least %d and at most %d %s."

    RANGE = "The value of '%s' must between %s and %s."

    #: Length units: (singular, plural)
    UNITS = ('character', 'characters')
    ARRAY_UNITS = ('element', 'elements')


#: Message table keys
MSG_KEYS = ('type', 'required', 'equals', 'length', 'range')

#: Largest absolute timestamp, in milliseconds, that still denotes a date (about 275 000 years)
MAX_TIMESTAMP = 8.64e15
