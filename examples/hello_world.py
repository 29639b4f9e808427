#!/usr/bin/env python3
"""End-to-end example: congruence of two words.

Walks the pipeline an exercise generator uses to compute a ground-truth
answer:

  1. Generate a random NFA from a seed (unreachable states pruned)
  2. Determinize it with the subset construction
  3. Minimize the DFA by partition refinement
  4. Sample two words and decide whether they are Myhill-Nerode equivalent
     and whether they are syntactically congruent

The same seed always yields the same automaton and words.

Usage:
    python examples/hello_world.py [seed]
"""

import logging
import sys

from finite_automata import (
    Random, convert_nfa_to_dfa, generate_nfa, generate_words, is_word_accepted,
    minimize_dfa, myhill_nerode_equivalent, sample_random_seed, syntactically_congruent,
)
from finite_automata.viz import transition_table


def show(name, automaton, alphabet):
    print(f'{name}: {len(automaton)} states')
    print('  start:', ', '.join(n.label for n in automaton.get_start_nodes()))
    print('  final:', ', '.join(n.label for n in automaton.get_end_nodes()))
    for label, *targets in transition_table(automaton, alphabet):
        cells = ['{%s}' % ','.join(t) for t in targets]
        print(f'  {label:>4}  ' + '  '.join(f'{c:<12}' for c in cells))


def main():
    logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    seed = sys.argv[1] if len(sys.argv) > 1 else sample_random_seed()
    print(f'seed: {seed}')
    random = Random(seed)
    alphabet = ['0', '1']

    # --- Step 1: random NFA ---
    nfa = generate_nfa(random, 5, alphabet, epsilon_chance=0.0)
    show('NFA', nfa, alphabet)

    # --- Step 2: subset construction ---
    dfa = convert_nfa_to_dfa(nfa, alphabet)
    show('DFA', dfa, alphabet)

    # --- Step 3: minimization ---
    minimal = minimize_dfa(dfa, alphabet)
    show('minimal DFA', minimal, alphabet)

    # --- Step 4: congruence questions ---
    word1, word2 = generate_words(random, 2, 2, 4, alphabet)
    print(f'words: {word1!r}, {word2!r}')
    print('  accepted:', is_word_accepted(nfa, word1), is_word_accepted(nfa, word2))
    print('  Myhill-Nerode equivalent:', myhill_nerode_equivalent(minimal, word1, word2))
    print('  syntactically congruent:', syntactically_congruent(minimal, word1, word2))


if __name__ == '__main__':
    main()
