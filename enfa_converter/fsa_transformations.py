import logging
from typing import Dict, List, Optional, Set
from .automaton import build_transition_table, epsilon_free_alphabet, get_targets, make_transition
from .epsilon_closure import TransitionTable, build_closure_map
from .fsa_validation import check_automaton

logger = logging.getLogger(__name__)


def project_transitions(automaton: Dict, closures: Dict[str, List[str]],
                        table: Optional[TransitionTable] = None) -> List[Dict]:
    """
    Rewrites the transition relation of an epsilon-NFA without epsilon edges.

    For every state q and every non-epsilon symbol a this emits one
    transition (q, t, a) for each t in ε-closure(δ(ε-closure(q), a)).
    Pairs with no target produce no transition.

    Args:
        automaton: A checked automaton dictionary
        closures: The closure map of the automaton (see build_closure_map)
        table: A prebuilt transition table for automaton['transitions']

    Returns:
        List[Dict]: Epsilon-free transitions ordered by state, then symbol, then target
    """
    if table is None:
        table = build_transition_table(automaton['transitions'])

    alphabet = epsilon_free_alphabet(automaton['alphabet'])
    projected = []

    for state in automaton['states']:
        for symbol in alphabet:
            # States reachable by one symbol from anywhere in the closure of state
            reached: Set[str] = set()
            for member in closures[state]:
                reached |= get_targets(table, member, symbol)

            if not reached:
                continue

            targets: Set[str] = set()
            for reached_state in reached:
                targets.update(closures[reached_state])

            for target in sorted(targets):
                projected.append(make_transition(state, target, symbol))

    return projected


def select_final_states(automaton: Dict, closures: Dict[str, List[str]]) -> List[str]:
    """States whose closure contains an original final state, in state order."""
    accepting = set(automaton['finalStates'])
    return [state for state in automaton['states'] if accepting.intersection(closures[state])]


def convert_enfa_to_nfa(enfa: Dict) -> Dict:
    """
    Converts an epsilon-NFA into an equivalent NFA without epsilon transitions.

    Args:
        enfa (Dict): A dictionary representing the epsilon-NFA with the following keys:
            - states: List of all states
            - alphabet: List of symbols, may include the epsilon marker ('' or 'ε')
            - transitions: List of {'from', 'to', 'symbol'} records
            - initialState: The initial state
            - finalStates: List of final states

    Returns:
        Dict: {'nfa': the epsilon-free automaton in the same format,
               'closures': {state: sorted epsilon closure}}

    Raises:
        AutomatonError: If the input violates an automaton invariant
    """
    automaton = check_automaton(enfa)

    # Full closure map first: the projector reads closures of arbitrary reached states
    table = build_transition_table(automaton['transitions'])
    closures = build_closure_map(automaton, table)

    nfa = {
        'states': list(automaton['states']),
        'alphabet': epsilon_free_alphabet(automaton['alphabet']),
        'transitions': project_transitions(automaton, closures, table),
        'initialState': automaton['initialState'],
        'finalStates': select_final_states(automaton, closures)
    }

    logger.debug(
        "Removed epsilon transitions: %d states, %d -> %d transitions, %d final states",
        len(nfa['states']), len(automaton['transitions']), len(nfa['transitions']), len(nfa['finalStates'])
    )

    return {'nfa': nfa, 'closures': closures}
