from typing import Dict
from .automaton import REQUIRED_KEYS, TRANSITION_KEYS, is_epsilon, normalise_automaton
from .errors import (
    MalformedAutomaton,
    UnknownInitialState,
    UnknownFinalState,
    DanglingTransitionEndpoint,
    UndeclaredSymbol
)


def validate_automaton_structure(fsa: Dict) -> Dict:
    """
    Validates that the automaton record has the required shape.

    Only the shape is checked here: keys, value types and state name
    uniqueness. Membership invariants are left to check_automaton.

    Args:
        fsa: The automaton dictionary to validate

    Returns:
        Dict: Validation result with 'valid' boolean and optional 'error' message
    """
    if not isinstance(fsa, dict):
        return {'valid': False, 'error': 'Automaton must be a dictionary'}

    for key in REQUIRED_KEYS:
        if key not in fsa:
            return {'valid': False, 'error': f'Missing required key: {key}'}

    for key in ['states', 'alphabet', 'transitions', 'finalStates']:
        if not isinstance(fsa[key], list):
            return {'valid': False, 'error': f'{key} must be a list'}

    if not isinstance(fsa['initialState'], str):
        return {'valid': False, 'error': 'initialState must be a string'}

    for key in ['states', 'alphabet', 'finalStates']:
        if not all(isinstance(item, str) for item in fsa[key]):
            return {'valid': False, 'error': f'{key} must only contain strings'}

    if len(set(fsa['states'])) != len(fsa['states']):
        duplicates = sorted({state for state in fsa['states'] if fsa['states'].count(state) > 1})
        return {'valid': False, 'error': f"Duplicate states: {', '.join(duplicates)}"}

    for index, transition in enumerate(fsa['transitions']):
        if not isinstance(transition, dict):
            return {'valid': False, 'error': f'Transition {index} must be a dictionary'}
        for key in TRANSITION_KEYS:
            if key not in transition:
                return {'valid': False, 'error': f"Transition {index} is missing '{key}'"}
            if not isinstance(transition[key], str):
                return {'valid': False, 'error': f"Transition {index} '{key}' must be a string"}

    return {'valid': True}


def check_automaton(fsa: Dict) -> Dict:
    """
    Checks every automaton invariant and returns a normalised copy.

    Checks run in a fixed order (shape, initial state, final states,
    transition endpoints, transition symbols) and the first violation is
    raised.

    Args:
        fsa: The automaton dictionary to check

    Returns:
        Dict: The normalised automaton (see normalise_automaton)

    Raises:
        MalformedAutomaton: If the record shape is wrong
        UnknownInitialState: If initialState is not a declared state
        UnknownFinalState: If a final state is not a declared state
        DanglingTransitionEndpoint: If a transition touches an undeclared state
        UndeclaredSymbol: If a non-epsilon transition symbol is not in the alphabet
    """
    validation = validate_automaton_structure(fsa)
    if not validation['valid']:
        raise MalformedAutomaton(validation['error'])

    automaton = normalise_automaton(fsa)
    states = set(automaton['states'])

    if automaton['initialState'] not in states:
        raise UnknownInitialState(automaton['initialState'])

    for state in automaton['finalStates']:
        if state not in states:
            raise UnknownFinalState(state)

    for transition in automaton['transitions']:
        for endpoint in ['from', 'to']:
            if transition[endpoint] not in states:
                raise DanglingTransitionEndpoint(transition, endpoint, transition[endpoint])

    alphabet = set(automaton['alphabet'])
    for transition in automaton['transitions']:
        symbol = transition['symbol']
        if not is_epsilon(symbol) and symbol not in alphabet:
            raise UndeclaredSymbol(transition, symbol)

    return automaton
