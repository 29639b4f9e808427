from finite_automata.automaton import AutomatonError
from finite_automata.determinize import epsilon_closure as _epsilon_closure, move


def simulate_from(dfa, start, word):
    """
    Follow the matching edge for each symbol of `word`, starting at the state
    labelled `start`.  Returns the label reached, or None as soon as a label
    is unknown or a symbol has no edge.

    An unknown `start` gives None even for the empty word, rather than
    echoing `start` back, so a None result always means "no such state".
    """
    current = start
    for x in word:
        if dfa.index(current) is None:
            return None
        targets = dfa.step(current, x)
        if not targets:
            return None
        current = targets[0]
    return current if dfa.index(current) is not None else None


def is_word_accepted(automaton, word, epsilon_closure=False):
    """
    Run `automaton` on `word`, tracking the set of possible states, and report
    whether any accepting state is reached.  Epsilon edges are ignored unless
    `epsilon_closure` is set.
    """
    current = {node.label for node in automaton.get_start_nodes()}
    if not current:
        raise AutomatonError('no start states')

    def close(labels):
        return _epsilon_closure(automaton, labels) if epsilon_closure else labels

    current = close(current)
    for x in word:
        current = close(move(automaton, current, x))

    accepting = {node.label for node in automaton.get_end_nodes()}
    return not current.isdisjoint(accepting)


def behaves_same_from_state(dfa, state, word1, word2):
    return simulate_from(dfa, state, word1) == simulate_from(dfa, state, word2)


def myhill_nerode_equivalent(dfa, word1, word2):
    """
    For a minimal DFA: do `word1` and `word2` lead from the start state to the
    same state, i.e. agree on every suffix?
    """
    starts = dfa.get_start_nodes()
    if not starts:
        raise AutomatonError('no start states')
    return behaves_same_from_state(dfa, starts[0].label, word1, word2)


def syntactically_congruent(dfa, word1, word2):
    "For a minimal DFA: do the two words act identically on every state?"
    return all(behaves_same_from_state(dfa, node.label, word1, word2) for node in dfa.nodes)


def generate_words(random, count, min_length, max_length, alphabet):
    "`count` random words with lengths in [min_length, max_length]."
    alphabet = list(alphabet)
    return [
        ''.join(random.choice(alphabet) for _ in range(random.int(min_length, max_length)))
        for _ in range(count)
    ]
