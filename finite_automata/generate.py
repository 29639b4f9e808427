"""
Random finite automata.

The random source is consumed in a fixed order, so a seeded `Random`
always reproduces the same automaton for the same parameters.
"""
import logging

from finite_automata.automaton import EPSILON, Automaton, Edge, Node, symbol_value
from finite_automata.config import DFA_DEFAULTS, NFA_DEFAULTS
from finite_automata.prune import prune_unreachable_states


logger = logging.getLogger(__name__)


def generate_finite_automaton(
    random,
    size,
    alphabet = NFA_DEFAULTS.alphabet,
    is_dfa = False,
    edge_chance = NFA_DEFAULTS.edge_chance,
    self_loop_chance = NFA_DEFAULTS.self_loop_chance,
    epsilon_chance = NFA_DEFAULTS.epsilon_chance,
    multi_start_chance = NFA_DEFAULTS.multi_start_chance,
    prune_unreachable = NFA_DEFAULTS.prune_unreachable,
):
    """
    Random automaton with states `q_0 .. q_{size-1}`; `q_0` is always a
    start state and one to three states accept.

    In DFA mode every state gets exactly one edge per symbol, preferring
    targets other than itself; a self loop may then overwrite one of them.
    In NFA mode each ordered pair of distinct states is connected with
    probability `edge_chance` on a random symbol, plus an optional epsilon
    edge and an optional extra self loop per state.
    """
    if size < 1:
        raise ValueError(f'size must be positive, got {size}')
    alphabet = list(alphabet)
    if not alphabet:
        raise ValueError('alphabet must not be empty')

    coords = [(random.float(0, 10), random.float(0, 10)) for _ in range(size)]
    is_start = [i == 0 for i in range(size)]
    is_end = [False] * size

    if not is_dfa:
        for i in range(1, size):
            if random.float(0, 1) < multi_start_chance:
                is_start[i] = True

    order = random.shuffle(list(range(size)))
    for i in order[:random.int(1, 3)]:
        is_end[i] = True

    edges = [[] for _ in range(size)]
    for i in range(size):
        if is_dfa:
            targets = random.shuffle([j for j in range(size) if j != i])
            for a in alphabet:
                j = targets.pop() if targets else i
                edges[i].append(Edge(i, j, symbol_value(a)))
        else:
            for j in range(size):
                if i != j and random.float(0, 1) < edge_chance:
                    edges[i].append(Edge(i, j, symbol_value(random.choice(alphabet))))
            if random.float(0, 1) < epsilon_chance:
                edges[i].append(Edge(i, random.int(0, size - 1), EPSILON))

        if random.float(0, 1) < self_loop_chance:
            loop = symbol_value(random.choice(alphabet))
            if is_dfa:
                # replace, keeping one edge per symbol
                for k, e in enumerate(edges[i]):
                    if e.value == loop:
                        edges[i][k] = Edge(i, i, loop)
                        break
            else:
                edges[i].append(Edge(i, i, loop))

    nodes = [Node(f'q_{i}', coords[i], is_start[i], is_end[i]) for i in range(size)]
    automaton = Automaton(nodes, edges, is_dfa=is_dfa)
    logger.debug('generated %s with %d states', 'DFA' if is_dfa else 'NFA', size)

    return prune_unreachable_states(automaton) if prune_unreachable else automaton


def generate_dfa(
    random,
    size,
    alphabet = DFA_DEFAULTS.alphabet,
    self_loop_chance = DFA_DEFAULTS.self_loop_chance,
    prune_unreachable = DFA_DEFAULTS.prune_unreachable,
):
    return generate_finite_automaton(
        random,
        size,
        alphabet,
        is_dfa = True,
        edge_chance = DFA_DEFAULTS.edge_chance,
        self_loop_chance = self_loop_chance,
        epsilon_chance = DFA_DEFAULTS.epsilon_chance,
        multi_start_chance = DFA_DEFAULTS.multi_start_chance,
        prune_unreachable = prune_unreachable,
    )


def generate_nfa(
    random,
    size,
    alphabet = NFA_DEFAULTS.alphabet,
    edge_chance = NFA_DEFAULTS.edge_chance,
    self_loop_chance = NFA_DEFAULTS.self_loop_chance,
    epsilon_chance = NFA_DEFAULTS.epsilon_chance,
    multi_start_chance = NFA_DEFAULTS.multi_start_chance,
    prune_unreachable = NFA_DEFAULTS.prune_unreachable,
):
    return generate_finite_automaton(
        random,
        size,
        alphabet,
        is_dfa = False,
        edge_chance = edge_chance,
        self_loop_chance = self_loop_chance,
        epsilon_chance = epsilon_chance,
        multi_start_chance = multi_start_chance,
        prune_unreachable = prune_unreachable,
    )
