from finite_automata.automaton import EPSILON, Automaton, AutomatonError, Edge, Node, symbol_value
from finite_automata.config import DEFAULT_ALPHABET, DFA_DEFAULTS, NFA_DEFAULTS, GeneratorConfig
from finite_automata.rng import Random, sample_random_seed
from finite_automata.generate import generate_finite_automaton, generate_dfa, generate_nfa
from finite_automata.prune import prune_unreachable_states
from finite_automata.determinize import convert_nfa_to_dfa
from finite_automata.minimize import minimize_dfa, is_isomorphic, equivalent, minimal_state_count
from finite_automata.simulate import (
    simulate_from, is_word_accepted, behaves_same_from_state,
    myhill_nerode_equivalent, syntactically_congruent, generate_words,
)
from finite_automata import examples
