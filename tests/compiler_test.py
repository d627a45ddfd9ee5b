import unittest
from copy import deepcopy

from fieldcheck import compile_rules, Rules, Rule, Messages
from fieldcheck import SchemaError, InvalidType, InvalidEquals, InvalidMessage, InvalidRange, InvalidLength, \
    MissingChildren

from testbase import FieldcheckTestBase


class CompilerTest(FieldcheckTestBase):
    """ Test compile_rules(): normalized rules and message tables """

    def test_shorthand(self):
        """ Test a type name alone: it's a rule with just the type """
        self.assertEqual(compile_rules({'scores': 'array'}).as_dict(), {
            'scores': {
                'type': 'array',
                'required': False,
                'msg': {'type': "'scores' must be an instance of Array."},
            }
        })

        # The same as the expanded form
        self.assertEqual(compile_rules({'scores': 'array'}), compile_rules({'scores': {'type': 'array'}}))

    def test_generic_type_message(self):
        """ Test the type message of types without a specific template """
        self.assertEqual(compile_rules({'name': 'string'}).as_dict(), {
            'name': {
                'type': 'string',
                'required': False,
                'msg': {'type': "'name' must be a valid string."},
            }
        })

    def test_strict_defaults(self):
        """ Test the default `strict` flag: numbers are strict, some types are not, the rest have no flag """
        rules = compile_rules({
            'score': 'number',
            'activated': 'boolean',
            'email': 'email',
            'homepage': 'url',
            'ip': 'ipv4',
            'book': 'isbn',
            'name': 'string',
            'ip6': 'ipv6',
        })
        self.assertIs(rules['score'].strict, True)
        self.assertIs(rules['activated'].strict, False)
        self.assertIs(rules['email'].strict, False)
        self.assertIs(rules['homepage'].strict, False)
        self.assertIs(rules['ip'].strict, False)
        self.assertIs(rules['book'].strict, False)
        self.assertIs(rules['name'].strict, None)
        self.assertIs(rules['ip6'].strict, None)

        # An explicit flag wins
        rules = compile_rules({'score': {'type': 'number', 'strict': False}})
        self.assertIs(rules['score'].strict, False)
        self.assertEqual(rules['score'].msg.type, "'score' must be a valid number or a numeric string.")

    def test_ipv4_messages(self):
        """ Test that the IPv4 message depends on the strict flag """
        rules = compile_rules({
            'ip': 'ipv4',
            'public_ip': {'type': 'ipv4', 'strict': True},
        })
        self.assertEqual(rules['ip'].msg.type, "'ip' must be a valid IPv4 address.")
        self.assertEqual(rules['public_ip'].msg.type,
                         "'public_ip' must be a valid, non-private and non-reserved IPv4 address.")

    def test_required(self):
        """ Test the `required` message """
        self.assertEqual(compile_rules({'score': {'type': 'number', 'required': True}}).as_dict(), {
            'score': {
                'type': 'number',
                'required': True,
                'strict': True,
                'msg': {
                    'type': "'score' must be a valid number.",
                    'required': "'score' must be provided.",
                },
            }
        })

    def test_length(self):
        """ Test `length`: an exact count, or a (min, max) pair """
        self.assertEqual(compile_rules({'name': {'type': 'string', 'length': 10}}).as_dict(), {
            'name': {
                'type': 'string',
                'required': False,
                'length': 10,
                'msg': {
                    'type': "'name' must be a valid string.",
                    'length': "'name' must contain 10 characters.",
                },
            }
        })

        self.assertEqual(compile_rules({'name': {'type': 'string', 'length': [3, 18]}}).as_dict(), {
            'name': {
                'type': 'string',
                'required': False,
                'length': (3, 18),
                'msg': {
                    'type': "'name' must be a valid string.",
                    'length': "'name' must contain at least 3 and at most 18 characters.",
                },
            }
        })

        # Arrays count elements
        rules = compile_rules({
            'scores': {'type': 'array', 'length': 3},
            'pair': {'type': 'array', 'length': [2, 4]},
            'single': {'type': 'array', 'length': 1},
            'letter': {'type': 'string', 'length': 1},
        })
        self.assertEqual(rules['scores'].msg.length, "'scores' must contain 3 elements.")
        self.assertEqual(rules['pair'].msg.length, "'pair' must contain at least 2 and at most 4 elements.")
        self.assertEqual(rules['single'].msg.length, "'single' must contain 1 element.")
        self.assertEqual(rules['letter'].msg.length, "'letter' must contain 1 character.")

        # Zero is a length too
        rules = compile_rules({'blank': {'type': 'string', 'length': 0}})
        self.assertEqual(rules['blank'].length, 0)
        self.assertEqual(rules['blank'].msg.length, "'blank' must contain 0 characters.")

    def test_range(self):
        """ Test `range`: a pair of numbers """
        self.assertEqual(compile_rules({'score': {'type': 'number', 'range': [1, 10]}}).as_dict(), {
            'score': {
                'type': 'number',
                'required': False,
                'strict': True,
                'range': (1, 10),
                'msg': {
                    'type': "'score' must be a valid number.",
                    'range': "The value of 'score' must between 1 and 10.",
                },
            }
        })

        rules = compile_rules({'ratio': {'type': 'number', 'range': (0.5, 1)}})
        self.assertEqual(rules['ratio'].msg.range, "The value of 'ratio' must between 0.5 and 1.")

    def test_equals(self):
        """ Test `equals`: the sibling should be required and have the same type """
        rules = compile_rules({
            'password': {'type': 'string', 'required': True},
            'confirm_password': {'type': 'string', 'equals': 'password'},
        })
        self.assertEqual(rules['confirm_password'].as_dict(), {
            'type': 'string',
            'required': False,
            'equals': 'password',
            'msg': {
                'type': "'confirm_password' must be a valid string.",
                'equals': "The value of 'confirm_password' must be the same as 'password'.",
            },
        })

    def test_custom_messages(self):
        """ Test `msg`: a single string, or a partial message table """
        # A single message for every failure
        rules = compile_rules({'name': {'type': 'string', 'required': True, 'length': [3, 18], 'msg': 'Bad name!'}})
        self.assertEqual(rules['name'].as_dict(), {
            'type': 'string',
            'required': True,
            'length': (3, 18),
            'msg': {
                'type': 'Bad name!',
                'required': 'Bad name!',
                'equals': 'Bad name!',
                'length': 'Bad name!',
            },
        })

        # Range gets the message only when there's no length
        rules = compile_rules({'score': {'type': 'number', 'range': [0, 1], 'msg': 'Bad score!'}})
        self.assertEqual(rules['score'].msg.range, 'Bad score!')
        self.assertIs(rules['score'].msg.length, None)
        self.assertIs(rules['score'].strict, True)

        # A partial table: the rest are defaults
        rules = compile_rules({'name': {
            'type': 'string',
            'length': 10,
            'msg': {'length': "The length of 'name' must be 10."},
        }})
        self.assertEqual(rules['name'].msg.as_dict(), {
            'type': "'name' must be a valid string.",
            'length': "The length of 'name' must be 10.",
        })

    def test_nested(self):
        """ Test an object with children rules: messages use the dotted path """
        rules = compile_rules({
            'scope': {
                'type': 'object',
                'children': {
                    'name': {'type': 'string', 'required': True},
                    'score': {'type': 'number', 'range': [0, 100]},
                    'confirm_name': {'type': 'string', 'equals': 'name'},
                },
            },
        })

        self.assertEqual(rules.as_dict(), {
            'scope': {
                'type': 'object',
                'required': False,
                'msg': {
                    'type': "'scope' must be a valid object.",
                },
                'children': {
                    'name': {
                        'type': 'string',
                        'required': True,
                        'msg': {
                            'type': "'scope.name' must be a valid string.",
                            'required': "'scope.name' must be provided.",
                        },
                    },
                    'score': {
                        'type': 'number',
                        'required': False,
                        'strict': True,
                        'range': (0, 100),
                        'msg': {
                            'type': "'scope.score' must be a valid number.",
                            'range': "The value of 'scope.score' must between 0 and 100.",
                        },
                    },
                    'confirm_name': {
                        'type': 'string',
                        'required': False,
                        'equals': 'name',
                        'msg': {
                            'type': "'scope.confirm_name' must be a valid string.",
                            'equals': "The value of 'scope.confirm_name' must be the same as 'scope.name'.",
                        },
                    },
                },
            },
        })

        # Paths
        name = rules['scope'].children['name']
        self.assertEqual(name.path, ('scope', 'name'))
        self.assertEqual(name.name, 'scope.name')

    def test_deeply_nested(self):
        """ Test three levels of objects """
        rules = compile_rules({
            'a': {'type': 'object', 'children': {
                'b': {'type': 'object', 'children': {
                    'c': {'type': 'string', 'required': True},
                }},
            }},
        })
        c = rules['a'].children['b'].children['c']
        self.assertEqual(c.path, ('a', 'b', 'c'))
        self.assertEqual(c.msg.required, "'a.b.c' must be provided.")

        with self.assertRaises(InvalidType) as cm:
            compile_rules({
                'a': {'type': 'object', 'children': {
                    'b': {'type': 'object', 'children': {
                        'c': 'unknown',
                    }},
                }},
            })
        self.assertEqual(str(cm.exception), "type 'unknown' of 'a.children.b.children.c' is invalid.")
        self.assertEqual(cm.exception.path, 'a.children.b.children.c')

    def test_idempotent(self):
        """ Test that compiling the same rules twice gives equal results, and the input is left intact """
        raw = {
            'name': {'type': 'string', 'required': True, 'length': [3, 18]},
            'age': {'type': 'number', 'range': [0, 120]},
            'email': 'email',
            'scope': {'type': 'object', 'children': {'city': 'string'}},
        }
        original = deepcopy(raw)

        a = compile_rules(raw)
        b = compile_rules(raw)
        self.assertEqual(a, b)
        self.assertEqual(a.as_dict(), b.as_dict())
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(original, raw)

    def test_rules_mapping(self):
        """ Test Rules: an immutable mapping of Rule objects """
        rules = compile_rules({'name': 'string', 'age': 'number'})
        self.assertIsInstance(rules, Rules)
        self.assertEqual(len(rules), 2)
        self.assertEqual(list(rules), ['name', 'age'])  # declaration order
        self.assertIsInstance(rules['name'], Rule)
        self.assertIsInstance(rules['name'].msg, Messages)
        self.assertIn('Rules(', repr(rules))

        with self.assertRaises(TypeError):
            rules['name'] = rules['age']

        with self.assertRaises(AttributeError):
            rules['name'].required = True


class CompilerErrorsTest(FieldcheckTestBase):
    """ Test malformed rules """

    def test_not_a_mapping(self):
        """ Test rules that are not a mapping at all """
        with self.assertRaises(SchemaError) as cm:
            compile_rules(['name', 'age'])
        self.assertEqual(str(cm.exception), 'Rules must be a mapping, got list')
        self.assertEqual(cm.exception.kind, 'SchemaError')

    def test_field_names(self):
        """ Test field names that are not strings """
        self.assertSchemaError({1: 'string'}, SchemaError('Field names must be strings, got 1', None))
        self.assertSchemaError({'scope': {'type': 'object', 'children': {('a', 'b'): 'string'}}},
                               SchemaError("Field names must be strings, got ('a', 'b')", 'scope'))

    def test_invalid_type(self):
        """ Test unknown types """
        self.assertSchemaError({'name': 'unknown'}, InvalidType("type 'unknown' of 'name' is invalid.", 'name'))
        self.assertSchemaError({'name': {'type': 'str'}}, InvalidType("type 'str' of 'name' is invalid.", 'name'))
        self.assertSchemaError({'name': {}}, InvalidType("type 'None' of 'name' is invalid.", 'name'))
        self.assertSchemaError({'name': 123}, InvalidType("type '123' of 'name' is invalid.", 'name'))

        # Type is checked first
        self.assertSchemaError({'name': {'type': 'unknown', 'equals': 'other', 'range': 1}},
                               InvalidType("type 'unknown' of 'name' is invalid.", 'name'))

    def test_invalid_equals(self):
        """ Test `equals` that refers to a missing, optional or differently typed sibling """
        e = InvalidEquals("comparing field 'name' must be defined with type 'string' and is required.",
                          'confirm_name')

        # Missing
        self.assertSchemaError({
            'confirm_name': {'type': 'string', 'equals': 'name'},
        }, e)

        # Not required
        self.assertSchemaError({
            'name': 'string',
            'confirm_name': {'type': 'string', 'equals': 'name'},
        }, e)
        self.assertSchemaError({
            'name': {'type': 'string', 'required': False},
            'confirm_name': {'type': 'string', 'equals': 'name'},
        }, e)

        # Different type
        self.assertSchemaError({
            'name': {'type': 'email', 'required': True},
            'confirm_name': {'type': 'string', 'equals': 'name'},
        }, e)

        # Nested: the sibling is looked up in the same scope
        self.assertSchemaError({
            'name': {'type': 'string', 'required': True},
            'scope': {'type': 'object', 'children': {
                'confirm_name': {'type': 'string', 'equals': 'name'},
            }},
        }, InvalidEquals("comparing field 'scope.children.name' must be defined with type 'string' and is required.",
                         'scope.children.confirm_name'))

    def test_invalid_message(self):
        """ Test `msg` that is neither a string nor a message table """
        self.assertSchemaError({'score': {'type': 'number', 'msg': True}},
                               InvalidMessage("'score.msg' must be a string or a dict.", 'score'))
        self.assertSchemaError({'score': {'type': 'number', 'msg': ['Bad score!']}},
                               InvalidMessage("'score.msg' must be a string or a dict.", 'score'))

        # Unknown keys, non-string messages
        self.assertSchemaError({'score': {'type': 'number', 'msg': {'typo': 'Bad score!'}}},
                               InvalidMessage("'score.msg' must be a string or a dict.", 'score'))
        self.assertSchemaError({'score': {'type': 'number', 'msg': {'type': 1}}},
                               InvalidMessage("'score.msg' must be a string or a dict.", 'score'))

        # Checked before the range
        self.assertSchemaError({'score': {'type': 'number', 'range': 10, 'msg': True}},
                               InvalidMessage("'score.msg' must be a string or a dict.", 'score'))

        # Nested
        self.assertSchemaError({'scope': {'type': 'object', 'children': {
            'name': 'string',
            'score': {'type': 'number', 'range': [0, 100], 'msg': True},
        }}}, InvalidMessage("'scope.children.score.msg' must be a string or a dict.", 'scope.children.score'))

    def test_invalid_range(self):
        """ Test `range` that is not a pair of numbers """
        e = InvalidRange("'score' must be a list that contains only 2 numbers.", 'score')
        self.assertSchemaError({'score': {'type': 'number', 'range': 10}}, e)
        self.assertSchemaError({'score': {'type': 'number', 'range': [1, 2, 3]}}, e)
        self.assertSchemaError({'score': {'type': 'number', 'range': [1]}}, e)
        self.assertSchemaError({'score': {'type': 'number', 'range': ['a', 'b']}}, e)
        self.assertSchemaError({'score': {'type': 'number', 'range': [True, 1]}}, e)

        # Checked even with a custom message
        self.assertSchemaError({'score': {'type': 'number', 'range': 10, 'msg': 'Bad score!'}}, e)

        # Nested
        self.assertSchemaError({'scope': {'type': 'object', 'children': {
            'name': 'string',
            'score': {'type': 'number', 'range': 100},
        }}}, InvalidRange("'scope.children.score' must be a list that contains only 2 numbers.",
                          'scope.children.score'))

    def test_invalid_length(self):
        """ Test `length` that is neither a count nor a pair of counts """
        e = InvalidLength("'name.length' must be a non-negative integer or a list that contains only 2 integers.",
                          'name')
        self.assertSchemaError({'name': {'type': 'string', 'length': 'abc'}}, e)
        self.assertSchemaError({'name': {'type': 'string', 'length': -1}}, e)
        self.assertSchemaError({'name': {'type': 'string', 'length': 1.5}}, e)
        self.assertSchemaError({'name': {'type': 'string', 'length': [1]}}, e)
        self.assertSchemaError({'name': {'type': 'string', 'length': [1, 2, 3]}}, e)
        self.assertSchemaError({'name': {'type': 'string', 'length': [-1, 3]}}, e)

    def test_missing_children(self):
        """ Test objects without children rules """
        e = MissingChildren("'scope' must contain children rules.", 'scope')
        self.assertSchemaError({'scope': 'object'}, e)
        self.assertSchemaError({'scope': {'type': 'object', 'children': {}}}, e)
        self.assertSchemaError({'scope': {'type': 'object', 'children': 'name'}}, e)

    def test_error_kinds(self):
        """ Test that all schema errors are SchemaErrors, and report their kind """
        for cls in (InvalidType, InvalidEquals, InvalidMessage, InvalidRange, InvalidLength, MissingChildren):
            e = cls('message', 'name')
            self.assertIsInstance(e, SchemaError)
            self.assertEqual(e.kind, cls.__name__)
            self.assertEqual(str(e), 'message')
            self.assertIn(cls.__name__, repr(e))


if __name__ == '__main__':
    unittest.main()
