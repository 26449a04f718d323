class AutomatonError(ValueError):
    """Base class for every rejection of a malformed automaton."""


class MalformedAutomaton(AutomatonError):
    """The automaton record does not have the expected shape."""


class UnknownInitialState(AutomatonError):

    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Initial state '{state}' not in states list")


class UnknownFinalState(AutomatonError):

    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Final state '{state}' not in states list")


class DanglingTransitionEndpoint(AutomatonError):
    """
    A transition references a state that is not declared.

    Attributes:
        transition: The offending transition record
        endpoint: Which end is unknown, 'from' or 'to'
        state: The unknown state
    """

    def __init__(self, transition: dict, endpoint: str, state: str):
        self.transition = transition
        self.endpoint = endpoint
        self.state = state
        super().__init__(
            f"Transition {_describe(transition)} has unknown '{endpoint}' state '{state}'"
        )


class UndeclaredSymbol(AutomatonError):

    def __init__(self, transition: dict, symbol: str):
        self.transition = transition
        self.symbol = symbol
        super().__init__(
            f"Transition {_describe(transition)} uses symbol '{symbol}' which is not in the alphabet"
        )


def _describe(transition: dict) -> str:
    symbol = transition.get('symbol')
    return f"{transition.get('from')} -{symbol or 'ε'}-> {transition.get('to')}"
