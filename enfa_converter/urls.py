from django.urls import path
from . import views

urlpatterns = [
    # Epsilon removal
    path('api/enfa-to-nfa/', views.enfa_to_nfa, name='enfa_to_nfa'),
    path('api/epsilon-closures/', views.epsilon_closures, name='epsilon_closures'),

    # Checks
    path('api/validate-automaton/', views.validate_automaton, name='validate_automaton'),
    path('api/check-epsilon-cycles/', views.check_epsilon_cycles, name='check_epsilon_cycles'),
    path('api/check-word/', views.check_word, name='check_word'),
]
