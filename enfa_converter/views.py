import json
import logging
from django.http import JsonResponse
from django.views.decorators.http import require_POST
from django.views.decorators.csrf import csrf_exempt
from .errors import AutomatonError
from .epsilon_closure import build_closure_map
from .fsa_properties import automaton_statistics, detect_epsilon_cycles
from .fsa_simulation import accepts
from .fsa_transformations import convert_enfa_to_nfa
from .fsa_validation import check_automaton

logger = logging.getLogger(__name__)


def _error_response(error: AutomatonError) -> JsonResponse:
    return JsonResponse({'error': str(error), 'error_type': type(error).__name__}, status=400)


def _server_error(e: Exception) -> JsonResponse:
    logger.exception("Unexpected error while handling automaton request")
    return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def enfa_to_nfa(request):
    """
    Django view to handle epsilon-NFA to NFA conversion requests.

    Expects a POST request with a JSON body containing:
    - automaton: The epsilon-NFA definition

    Returns a JSON response with the converted NFA, the epsilon closure of
    every state and before/after statistics.
    """
    try:
        data = json.loads(request.body)
        automaton = data.get('automaton')

        if not automaton:
            return JsonResponse({'error': 'Missing automaton definition'}, status=400)

        result = convert_enfa_to_nfa(automaton)
        nfa = result['nfa']

        original_stats = automaton_statistics(check_automaton(automaton))
        converted_stats = automaton_statistics(nfa)

        conversion_stats = {
            'epsilon_transitions_removed': original_stats['epsilon_transitions_count'],
            'transitions_added': converted_stats['transitions_count'] - original_stats['transitions_count'],
            'final_states_added': converted_stats['final_states_count'] - original_stats['final_states_count']
        }

        if original_stats['has_epsilon_transitions']:
            message = 'Epsilon-NFA successfully converted to NFA'
        else:
            message = 'Input had no epsilon transitions, returned equivalent NFA'

        return JsonResponse({
            'success': True,
            'original_automaton': automaton,
            'nfa': nfa,
            'closures': result['closures'],
            'statistics': {
                'original': original_stats,
                'converted': converted_stats,
                'conversion': conversion_stats
            },
            'message': message
        })

    except AutomatonError as e:
        return _error_response(e)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return _server_error(e)


@csrf_exempt
@require_POST
def epsilon_closures(request):
    """
    Django view returning the epsilon closure of every state.
    """
    try:
        data = json.loads(request.body)
        automaton = data.get('automaton')

        if not automaton:
            return JsonResponse({'error': 'Missing automaton definition'}, status=400)

        checked = check_automaton(automaton)
        return JsonResponse({'closures': build_closure_map(checked)})

    except AutomatonError as e:
        return _error_response(e)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return _server_error(e)


@csrf_exempt
@require_POST
def validate_automaton(request):
    """
    Django view to check an automaton against every invariant.

    An invalid automaton is a normal answer here, so both outcomes use
    status 200. Only an unreadable request is a 400.
    """
    try:
        data = json.loads(request.body)
        automaton = data.get('automaton')

        if automaton is None:
            return JsonResponse({'error': 'Missing automaton definition'}, status=400)

        try:
            check_automaton(automaton)
        except AutomatonError as e:
            return JsonResponse({'valid': False, 'error': str(e), 'error_type': type(e).__name__})

        return JsonResponse({'valid': True})

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return _server_error(e)


@csrf_exempt
@require_POST
def check_epsilon_cycles(request):
    """
    Django view reporting cycles formed by epsilon transitions.
    """
    try:
        data = json.loads(request.body)
        automaton = data.get('automaton')

        if not automaton:
            return JsonResponse({'error': 'Missing automaton definition'}, status=400)

        return JsonResponse(detect_epsilon_cycles(check_automaton(automaton)))

    except AutomatonError as e:
        return _error_response(e)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return _server_error(e)


@csrf_exempt
@require_POST
def check_word(request):
    """
    Django view to test whether an automaton accepts a word.

    Expects a POST request with a JSON body containing:
    - automaton: The automaton definition (epsilon transitions allowed)
    - input: A list of symbols, or a string read one character per symbol
    """
    try:
        data = json.loads(request.body)
        automaton = data.get('automaton')
        word = data.get('input', [])

        if not automaton:
            return JsonResponse({'error': 'Missing automaton definition'}, status=400)

        if isinstance(word, str):
            word = list(word)
        elif not isinstance(word, list) or not all(isinstance(symbol, str) for symbol in word):
            return JsonResponse({'error': 'input must be a string or a list of symbols'}, status=400)

        return JsonResponse({'accepted': accepts(check_automaton(automaton), word)})

    except AutomatonError as e:
        return _error_response(e)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return _server_error(e)
