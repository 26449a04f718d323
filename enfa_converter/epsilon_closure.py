from typing import Dict, List, Optional, Set, Union
from .automaton import EPSILON, build_transition_table, get_targets

TransitionTable = Dict[str, Dict[str, Set[str]]]


def epsilon_closure(state: str, transitions: Union[List[Dict], TransitionTable]) -> List[str]:
    """
    Computes the epsilon closure of a single state.

    The closure always contains the state itself. A state is pushed onto the
    work stack only the first time it is added to the closure, so each state
    is expanded at most once and epsilon cycles terminate.

    Args:
        state: The state to compute the closure for
        transitions: Transition records, or a table from build_transition_table

    Returns:
        List[str]: The closure, sorted lexicographically
    """
    table = transitions if isinstance(transitions, dict) else build_transition_table(transitions)

    closure = {state}
    stack = [state]

    while stack:
        current = stack.pop()
        for next_state in get_targets(table, current, EPSILON):
            if next_state not in closure:
                closure.add(next_state)
                stack.append(next_state)

    return sorted(closure)


def build_closure_map(automaton: Dict, table: Optional[TransitionTable] = None) -> Dict[str, List[str]]:
    """
    Computes the epsilon closure of every state of an automaton.

    Args:
        automaton: The automaton dictionary
        table: A prebuilt transition table for automaton['transitions']

    Returns:
        Dict[str, List[str]]: One sorted closure per declared state, in state order
    """
    if table is None:
        table = build_transition_table(automaton['transitions'])
    return {state: epsilon_closure(state, table) for state in automaton['states']}
