from django.test import TestCase
from enfa_converter.fsa_simulation import accepts


class TestAccepts(TestCase):
    """Test cases for word acceptance"""

    def setUp(self):
        # Accepts 0*1*0*
        self.enfa = {
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
        }

    def test_empty_word_through_epsilon(self):
        """Test that the empty word is accepted through epsilon moves"""
        self.assertTrue(accepts(self.enfa, ''))
        self.assertTrue(accepts(self.enfa, []))

    def test_accepted_words(self):
        """Test words of the form 0*1*0*"""
        for word in ['0', '1', '00', '011', '0110', '1100', '010']:
            self.assertTrue(accepts(self.enfa, word), f"Expected '{word}' to be accepted")

    def test_rejected_words(self):
        """Test words that are not of the form 0*1*0*"""
        for word in ['101', '0101', '1001', '01010']:
            self.assertFalse(accepts(self.enfa, word), f"Expected '{word}' to be rejected")

    def test_symbol_outside_alphabet(self):
        """Test that an unknown symbol rejects"""
        self.assertFalse(accepts(self.enfa, '02'))

    def test_epsilon_is_not_an_input_symbol(self):
        """Test that the epsilon marker cannot be consumed as input"""
        self.assertFalse(accepts(self.enfa, ['ε']))

    def test_multi_character_symbols(self):
        """Test symbols longer than one character given as a list"""
        fsa = {
            'states': ['start', 'end'],
            'alphabet': ['go', 'stop'],
            'transitions': [
                {'from': 'start', 'to': 'end', 'symbol': 'go'},
                {'from': 'end', 'to': 'start', 'symbol': 'stop'},
            ],
            'initialState': 'start',
            'finalStates': ['end']
        }
        self.assertTrue(accepts(fsa, ['go']))
        self.assertTrue(accepts(fsa, ['go', 'stop', 'go']))
        self.assertFalse(accepts(fsa, ['go', 'stop']))

    def test_epsilon_cycle_terminates(self):
        """Test simulation through an epsilon cycle"""
        fsa = {
            'states': ['X', 'Y', 'Z'],
            'alphabet': ['a'],
            'transitions': [
                {'from': 'X', 'to': 'Y', 'symbol': ''},
                {'from': 'Y', 'to': 'X', 'symbol': ''},
                {'from': 'Y', 'to': 'Z', 'symbol': 'a'},
            ],
            'initialState': 'X',
            'finalStates': ['Z']
        }
        self.assertTrue(accepts(fsa, 'a'))
        self.assertFalse(accepts(fsa, ''))
        self.assertFalse(accepts(fsa, 'aa'))
