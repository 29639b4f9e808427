from finite_automata.automaton import EPSILON, Automaton


def zeros_then_one():
    "NFA accepting `0^n 1` for n >= 1."
    return Automaton.from_arcs(
        [
            ('q_0', '0', 'q_0'),
            ('q_0', '0', 'q_1'),
            ('q_1', '1', 'q_2'),
        ],
        start = ['q_0'],
        stop = ['q_2'],
    )


def zeros_then_one_dfa():
    "The DFA `convert_nfa_to_dfa(zeros_then_one())` produces, built by hand."
    return Automaton.from_arcs(
        [
            ('q_0', '0', 'q_1'), ('q_0', '1', 'q_2'),
            ('q_1', '0', 'q_1'), ('q_1', '1', 'q_3'),
            ('q_2', '0', 'q_2'), ('q_2', '1', 'q_2'),
            ('q_3', '0', 'q_2'), ('q_3', '1', 'q_2'),
        ],
        start = ['q_0'],
        stop = ['q_3'],
        is_dfa = True,
    )


def even_zeros():
    "DFA over {0, 1} accepting words with an even number of 0s."
    return Automaton.from_arcs(
        [
            ('q_0', '0', 'q_1'), ('q_0', '1', 'q_0'),
            ('q_1', '0', 'q_0'), ('q_1', '1', 'q_1'),
        ],
        start = ['q_0'],
        stop = ['q_0'],
        is_dfa = True,
    )


def redundant_even_zeros():
    "`even_zeros` with each state duplicated; minimizes to two states."
    return Automaton.from_arcs(
        [
            ('q_0', '0', 'q_1'), ('q_0', '1', 'q_2'),
            ('q_1', '0', 'q_2'), ('q_1', '1', 'q_3'),
            ('q_2', '0', 'q_3'), ('q_2', '1', 'q_0'),
            ('q_3', '0', 'q_0'), ('q_3', '1', 'q_1'),
        ],
        start = ['q_0'],
        stop = ['q_0', 'q_2'],
        is_dfa = True,
    )


def unreachable_tail():
    "Five states where `q_4` only has outgoing edges."
    return Automaton.from_arcs(
        [
            ('q_0', '0', 'q_1'),
            ('q_1', '1', 'q_2'),
            ('q_2', '0', 'q_3'),
            ('q_3', '1', 'q_0'),
            ('q_4', '0', 'q_0'),
            ('q_4', '1', 'q_3'),
        ],
        start = ['q_0'],
        stop = ['q_3', 'q_4'],
    )


def unreachable_middle():
    "Four states where `q_1` is unreachable, so pruning shifts the labels after it."
    return Automaton.from_arcs(
        [
            ('q_0', '0', 'q_2'),
            ('q_1', '0', 'q_3'),
            ('q_2', '1', 'q_3'),
            ('q_3', '0', 'q_0'),
        ],
        start = ['q_0'],
        stop = ['q_3'],
        states = ['q_0', 'q_1', 'q_2', 'q_3'],
    )


def epsilon_then_zero():
    "`q_0 -ε-> q_1 -0-> q_2`; accepts `0` only when epsilon edges are followed."
    return Automaton.from_arcs(
        [
            ('q_0', EPSILON, 'q_1'),
            ('q_1', '0', 'q_2'),
        ],
        start = ['q_0'],
        stop = ['q_2'],
    )


def two_starts():
    "NFA with two start states: `a` from `s`, or `b` from `t`."
    return Automaton.from_arcs(
        [
            ('s', 'a', 'f'),
            ('t', 'b', 'f'),
        ],
        start = ['s', 't'],
        stop = ['f'],
    )
