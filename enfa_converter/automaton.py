from typing import Dict, Iterable, List, Set, Tuple
from collections import defaultdict

# Canonical epsilon marker. 'ε' is accepted on input and rewritten to this.
EPSILON = ''
EPSILON_ALIASES = ('ε',)

REQUIRED_KEYS = ['states', 'alphabet', 'transitions', 'initialState', 'finalStates']
TRANSITION_KEYS = ['from', 'to', 'symbol']


def is_epsilon(symbol: str) -> bool:
    return symbol == EPSILON or symbol in EPSILON_ALIASES


def normalise_symbol(symbol: str) -> str:
    """Map every accepted spelling of epsilon onto EPSILON."""
    return EPSILON if is_epsilon(symbol) else symbol


def make_transition(from_state: str, to_state: str, symbol: str) -> Dict:
    return {'from': from_state, 'to': to_state, 'symbol': symbol}


def transition_key(transition: Dict) -> Tuple[str, str, str]:
    return transition['from'], transition['to'], normalise_symbol(transition['symbol'])


def _unique(items: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def normalise_automaton(fsa: Dict) -> Dict:
    """
    Builds a canonical copy of an automaton record.

    Epsilon symbols are rewritten to EPSILON in both the alphabet and the
    transitions, repeated alphabet entries and final states are collapsed and
    duplicate transition triples are reduced to a single edge. The order of
    first appearance is kept everywhere. The input is not modified.

    Args:
        fsa: An automaton record with a valid structure

    Returns:
        Dict: A new automaton record
    """
    transitions = []
    seen = set()
    for transition in fsa['transitions']:
        key = transition_key(transition)
        if key not in seen:
            seen.add(key)
            transitions.append(make_transition(*key))

    return {
        'states': list(fsa['states']),
        'alphabet': _unique(normalise_symbol(symbol) for symbol in fsa['alphabet']),
        'transitions': transitions,
        'initialState': fsa['initialState'],
        'finalStates': _unique(fsa['finalStates'])
    }


def epsilon_free_alphabet(alphabet: Iterable[str]) -> List[str]:
    return [symbol for symbol in _unique(alphabet) if not is_epsilon(symbol)]


def build_transition_table(transitions: Iterable[Dict]) -> Dict[str, Dict[str, Set[str]]]:
    """
    Indexes a transition list by source state and symbol.

    Args:
        transitions: Transition records with 'from', 'to' and 'symbol' keys

    Returns:
        Dict: {state: {symbol: set of target states}}, epsilon stored under EPSILON
    """
    table = defaultdict(lambda: defaultdict(set))
    for transition in transitions:
        table[transition['from']][normalise_symbol(transition['symbol'])].add(transition['to'])
    return table


def get_targets(table: Dict[str, Dict[str, Set[str]]], state: str, symbol: str) -> Set[str]:
    """Targets of (state, symbol) without growing a defaultdict table."""
    if state not in table:
        return set()
    return table[state].get(symbol, set())
