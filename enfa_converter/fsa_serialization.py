import json
from typing import Dict
from .automaton import normalise_automaton
from .errors import MalformedAutomaton
from .fsa_validation import validate_automaton_structure


def automaton_from_json(text: str) -> Dict:
    """
    Parses a JSON automaton document.

    The result is normalised (canonical epsilon, no duplicate edges) but the
    membership invariants are not checked; convert_enfa_to_nfa does that.

    Raises:
        MalformedAutomaton: If the text is not JSON or lacks a required field
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedAutomaton(f'Invalid JSON: {e}') from e

    validation = validate_automaton_structure(data)
    if not validation['valid']:
        raise MalformedAutomaton(validation['error'])

    return normalise_automaton(data)


def automaton_to_json(fsa: Dict) -> str:
    return json.dumps(fsa, indent=2, ensure_ascii=False)
