from typing import Dict, Iterable, Set
from .automaton import build_transition_table, epsilon_free_alphabet, get_targets
from .epsilon_closure import TransitionTable, epsilon_closure


def accepts(fsa: Dict, word: Iterable[str]) -> bool:
    """
    Checks whether an automaton, with or without epsilon transitions, accepts a word.

    All runs are followed at once: the current set of states starts as the
    epsilon closure of the initial state and every symbol moves it to the
    closure of the targets reached on that symbol.

    Args:
        fsa: The automaton dictionary
        word: A sequence of symbols. A string is read one character per symbol.

    Returns:
        bool: True if some run ends in a final state. A symbol outside the
        alphabet rejects the word.
    """
    table = build_transition_table(fsa['transitions'])
    alphabet = set(epsilon_free_alphabet(fsa['alphabet']))

    current = _closure_of_set({fsa['initialState']}, table)

    for symbol in word:
        if symbol not in alphabet:
            return False

        moved: Set[str] = set()
        for state in current:
            moved |= get_targets(table, state, symbol)

        if not moved:
            return False
        current = _closure_of_set(moved, table)

    return bool(current & set(fsa['finalStates']))


def _closure_of_set(states: Set[str], table: TransitionTable) -> Set[str]:
    closure: Set[str] = set()
    for state in states:
        closure.update(epsilon_closure(state, table))
    return closure
