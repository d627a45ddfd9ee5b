""" Misc utilities """

from collections.abc import Mapping
from datetime import date, time, datetime


class Undefined(object):
    """ Special singleton object to represent the case when no value was provided.

    This value is never equal to anything: this makes sure it will never match any condition.
    """

    _instance = None

    def __new__(cls):
        # Singleton
        if cls._instance is None:
            cls._instance = super(Undefined, cls).__new__(cls)
        return cls._instance

    def __eq__(self, other):
        return False

    def __ne__(self, other):
        return True

    def __hash__(self):
        return id(self)

    def __bool__(self):
        return False

    def __repr__(self):
        return '<Undefined>'


#: Undefined singleton
UNDEFINED = Undefined()


__type_names = {
    None:       'None',
    type(None): 'None',
    Undefined:  'Nothing',
    bool:       'Boolean',
    int:        'Integer number',
    float:      'Fractional number',
    complex:    'Complex number',
    str:        'String',
    bytes:      'Binary String',
    tuple:      'Tuple',
    list:       'List',
    set:        'Set',
    frozenset:  'Frozen Set',
    dict:       'Dictionary',
    date:       'Date',
    time:       'Time',
    datetime:   'DateTime',
}


def get_type_name(t):
    """ Get a human-friendly name for the given type.

    :type t: type|None
    :rtype: str
    """
    # Lookup in the mapping
    try:
        return __type_names[t]
    except KeyError:
        # Specific types
        if issubclass(t, Mapping):
            return 'Mapping'
        # Get name from the Type itself
        return t.__name__.capitalize()


def is_absent(v):
    """ Test whether the value counts as "not provided": missing or `None` """
    return v is None or v is UNDEFINED


def byte_length(s):
    """ Get the length of the string in UTF-8 bytes

    :type s: str
    :rtype: int
    """
    return len(s.encode('utf-8', 'surrogatepass'))


def is_ascii(s):
    """ Test that the string has no multi-byte characters: its byte length equals its length """
    return byte_length(s) == len(s)


def is_number(v):
    """ Test that the value is a real number primitive (booleans excluded) """
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def field_name(path):
    """ Dotted name of a field, used in validation messages: 'scope.name'

    :type path: tuple
    :rtype: str
    """
    return '.'.join(path)


def schema_name(path):
    """ Name of a rule within the schema, used in schema errors: 'scope.children.name'

    :type path: tuple
    :rtype: str
    """
    return '.children.'.join(path)
