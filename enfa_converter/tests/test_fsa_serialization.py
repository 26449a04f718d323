import json
from django.test import TestCase
from enfa_converter.errors import MalformedAutomaton
from enfa_converter.fsa_serialization import automaton_from_json, automaton_to_json
from enfa_converter.fsa_transformations import convert_enfa_to_nfa


class TestFsaSerialization(TestCase):
    """Test cases for the JSON import and export"""

    def setUp(self):
        self.document = json.dumps({
            'states': ['A', 'B', 'C'],
            'alphabet': ['0', '1', 'ε'],
            'transitions': [
                {'from': 'A', 'to': 'A', 'symbol': '0'},
                {'from': 'A', 'to': 'B', 'symbol': 'ε'},
                {'from': 'B', 'to': 'B', 'symbol': '1'},
                {'from': 'B', 'to': 'C', 'symbol': 'ε'},
                {'from': 'C', 'to': 'C', 'symbol': '0'},
            ],
            'initialState': 'A',
            'finalStates': ['C']
        })

    def test_import_normalises_epsilon(self):
        """Test that 'ε' is imported as the canonical empty-string epsilon"""
        automaton = automaton_from_json(self.document)
        self.assertEqual(automaton['alphabet'], ['0', '1', ''])
        self.assertEqual(automaton['transitions'][1], {'from': 'A', 'to': 'B', 'symbol': ''})

    def test_imported_automaton_converts(self):
        """Test that an imported automaton can be converted directly"""
        result = convert_enfa_to_nfa(automaton_from_json(self.document))
        self.assertEqual(result['nfa']['finalStates'], ['A', 'B', 'C'])

    def test_invalid_json(self):
        """Test that unparsable text raises MalformedAutomaton"""
        with self.assertRaises(MalformedAutomaton) as context:
            automaton_from_json('{"states": [')
        self.assertTrue(str(context.exception).startswith('Invalid JSON'))

    def test_missing_field(self):
        """Test that a document without a required field is rejected"""
        document = json.loads(self.document)
        del document['finalStates']
        with self.assertRaises(MalformedAutomaton) as context:
            automaton_from_json(json.dumps(document))
        self.assertEqual(str(context.exception), 'Missing required key: finalStates')

    def test_import_does_not_check_membership(self):
        """Test that membership invariants are left to conversion"""
        document = json.loads(self.document)
        document['initialState'] = 'Z'
        automaton = automaton_from_json(json.dumps(document))
        self.assertEqual(automaton['initialState'], 'Z')

    def test_export(self):
        """Test that export writes indented JSON that reads back to the same record"""
        automaton = automaton_from_json(self.document)
        text = automaton_to_json(automaton)
        self.assertIn('\n  "states": [', text)
        self.assertEqual(json.loads(text), automaton)

    def test_export_keeps_unicode_symbols(self):
        """Test that non-ASCII symbols are written as-is"""
        automaton = {
            'states': ['A'],
            'alphabet': ['α'],
            'transitions': [],
            'initialState': 'A',
            'finalStates': []
        }
        self.assertIn('"α"', automaton_to_json(automaton))
