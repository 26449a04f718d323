from typing import Dict
from collections import deque
from .automaton import build_transition_table, epsilon_free_alphabet, is_epsilon


def has_epsilon_transitions(fsa: Dict) -> bool:
    return any(is_epsilon(transition['symbol']) for transition in fsa['transitions'])


def is_nondeterministic(fsa: Dict) -> bool:
    """
    Checks if the automaton is non-deterministic.

    An automaton is non-deterministic if:
    1. It has epsilon transitions
    2. For some state and symbol, there are multiple possible next states

    Args:
        fsa: The automaton dictionary

    Returns:
        True if non-deterministic, False if deterministic
    """
    if has_epsilon_transitions(fsa):
        return True

    table = build_transition_table(fsa['transitions'])
    return any(
        len(targets) > 1
        for symbols in table.values()
        for targets in symbols.values()
    )


def detect_epsilon_cycles(fsa: Dict) -> Dict:
    """
    Finds the cycles formed by epsilon transitions.

    Epsilon cycles are legal and handled by the closure computation; this is
    reported for display only. Cycles are the strongly connected components
    of the epsilon graph with more than one state, plus epsilon self-loops.

    Args:
        fsa: The automaton dictionary

    Returns:
        Dictionary with:
        {
            'has_epsilon_cycles': bool,
            'cycles': [
                {
                    'states': [state1, state2, ...],  # Sorted states of the cycle
                    'reachable_from_start': bool  # Whether the cycle is reachable from the initial state
                }
            ]
        }
    """
    epsilon_graph = {state: [] for state in fsa['states']}
    for transition in fsa['transitions']:
        if is_epsilon(transition['symbol']) and transition['from'] in epsilon_graph:
            epsilon_graph[transition['from']].append(transition['to'])

    # Tarjan's algorithm
    index_counter = [0]
    stack = []
    lowlinks = {}
    index = {}
    on_stack = {}
    components = []

    def strongconnect(state):
        index[state] = index_counter[0]
        lowlinks[state] = index_counter[0]
        index_counter[0] += 1
        stack.append(state)
        on_stack[state] = True

        for successor in epsilon_graph.get(state, []):
            if successor not in index:
                strongconnect(successor)
                lowlinks[state] = min(lowlinks[state], lowlinks[successor])
            elif on_stack.get(successor):
                lowlinks[state] = min(lowlinks[state], index[successor])

        if lowlinks[state] == index[state]:
            component = []
            while True:
                w = stack.pop()
                on_stack[w] = False
                component.append(w)
                if w == state:
                    break
            if len(component) > 1 or state in epsilon_graph.get(state, []):
                components.append(component)

    for state in fsa['states']:
        if state not in index:
            strongconnect(state)

    reachable = _reachable_states(fsa)
    cycles = [
        {
            'states': sorted(component),
            'reachable_from_start': any(state in reachable for state in component)
        }
        for component in components
    ]
    cycles.sort(key=lambda cycle: cycle['states'])

    return {
        'has_epsilon_cycles': bool(cycles),
        'cycles': cycles
    }


def _reachable_states(fsa: Dict) -> set:
    """States reachable from the initial state over any transition."""
    table = build_transition_table(fsa['transitions'])
    start = fsa['initialState']
    reachable = {start}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for targets in table.get(current, {}).values():
            for next_state in targets:
                if next_state not in reachable:
                    reachable.add(next_state)
                    queue.append(next_state)

    return reachable


def automaton_statistics(fsa: Dict) -> Dict:
    """Summary counts of an automaton, as reported by the conversion endpoint."""
    epsilon_count = sum(1 for transition in fsa['transitions'] if is_epsilon(transition['symbol']))
    return {
        'states_count': len(fsa['states']),
        'alphabet_size': len(epsilon_free_alphabet(fsa['alphabet'])),
        'transitions_count': len(fsa['transitions']),
        'epsilon_transitions_count': epsilon_count,
        'final_states_count': len(fsa['finalStates']),
        'has_epsilon_transitions': epsilon_count > 0,
        'is_nondeterministic': is_nondeterministic(fsa)
    }
