"""
Pure editing operations on automaton records.

Each function returns a new automaton and leaves its argument untouched.
Edits that make no sense (empty names, entries that already exist) return an
unchanged copy.
"""
from typing import Dict
from .automaton import EPSILON, is_epsilon, make_transition, normalise_symbol, transition_key


def empty_automaton() -> Dict:
    return {
        'states': ['A'],
        'alphabet': [EPSILON],
        'transitions': [],
        'initialState': 'A',
        'finalStates': []
    }


def _copy(fsa: Dict) -> Dict:
    return {
        'states': list(fsa['states']),
        'alphabet': list(fsa['alphabet']),
        'transitions': [dict(transition) for transition in fsa['transitions']],
        'initialState': fsa['initialState'],
        'finalStates': list(fsa['finalStates'])
    }


def add_state(fsa: Dict, state: str) -> Dict:
    result = _copy(fsa)
    if state and state not in result['states']:
        result['states'].append(state)
    return result


def remove_state(fsa: Dict, state: str) -> Dict:
    """
    Removes a state together with its final flag and every transition touching it.

    If the removed state was the initial state, the first remaining state
    becomes initial (the empty string when none remain).
    """
    result = _copy(fsa)
    result['states'] = [s for s in result['states'] if s != state]
    result['finalStates'] = [s for s in result['finalStates'] if s != state]
    result['transitions'] = [
        t for t in result['transitions'] if t['from'] != state and t['to'] != state
    ]
    if result['initialState'] == state:
        result['initialState'] = result['states'][0] if result['states'] else ''
    return result


def add_symbol(fsa: Dict, symbol: str) -> Dict:
    result = _copy(fsa)
    declared = {normalise_symbol(s) for s in result['alphabet']}
    if symbol and normalise_symbol(symbol) not in declared:
        result['alphabet'].append(normalise_symbol(symbol))
    return result


def remove_symbol(fsa: Dict, symbol: str) -> Dict:
    """Removes a symbol and its transitions. The epsilon marker is kept."""
    result = _copy(fsa)
    if is_epsilon(symbol):
        return result
    result['alphabet'] = [s for s in result['alphabet'] if s != symbol]
    result['transitions'] = [t for t in result['transitions'] if t['symbol'] != symbol]
    return result


def add_transition(fsa: Dict, from_state: str, to_state: str, symbol: str) -> Dict:
    result = _copy(fsa)
    if not from_state or not to_state:
        return result
    transition = make_transition(from_state, to_state, symbol)
    key = transition_key(transition)
    if all(transition_key(t) != key for t in result['transitions']):
        result['transitions'].append(transition)
    return result


def remove_transition(fsa: Dict, index: int) -> Dict:
    result = _copy(fsa)
    if not 0 <= index < len(result['transitions']):
        raise IndexError(f'Transition index {index} out of range')
    del result['transitions'][index]
    return result


def toggle_final_state(fsa: Dict, state: str) -> Dict:
    result = _copy(fsa)
    if state in result['finalStates']:
        result['finalStates'] = [s for s in result['finalStates'] if s != state]
    else:
        result['finalStates'].append(state)
    return result


def set_initial_state(fsa: Dict, state: str) -> Dict:
    result = _copy(fsa)
    result['initialState'] = state
    return result
