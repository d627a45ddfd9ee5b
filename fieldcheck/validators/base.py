class ValidatorBase(object):
    """ Base for class-based validators.

    A validator is a boolean oracle: it is called with the input value and tells whether it's acceptable.
    Reporting is left to the engine, which knows the messages of the rule.

    :param strict: Strict mode: narrows the set of acceptable values, for validators that support it
    :type strict: bool
    """

    #: Validator name.
    #: Must be overridden in subclasses, and potentially hold the value
    name = '???'

    def __init__(self, strict=False):
        self.strict = bool(strict)

    def __call__(self, v):
        """ Do validation

        :param v: Input value
        :return: Whether the value is valid
        :rtype: bool
        """
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) == type(other) and vars(self) == vars(other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self), self.strict))

    def __repr__(self):
        return '{}(strict={!r})'.format(type(self).__name__, self.strict)

    def __str__(self):
        return self.name
