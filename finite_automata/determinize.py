import logging
from collections import deque

from arsenal import Integerizer

from finite_automata.automaton import Automaton, Edge, Node, symbol_value
from finite_automata.config import DEFAULT_ALPHABET


logger = logging.getLogger(__name__)


def epsilon_closure(automaton, labels):
    "Labels reachable from `labels` through epsilon edges only."
    closure = set(labels)
    stack = list(labels)
    while stack:
        label = stack.pop()
        for e in automaton.get_outgoing_edges(label):
            if not e.is_epsilon: continue
            target = automaton.nodes[e.target].label
            if target not in closure:
                closure.add(target)
                stack.append(target)
    return closure


def move(automaton, labels, symbol):
    "Union of the `symbol` successors of every label in `labels`."
    return {q for label in labels for q in automaton.step(label, symbol)}


def convert_nfa_to_dfa(nfa, alphabet=DEFAULT_ALPHABET, epsilon_closure=False):
    """
    Subset construction.

    DFA states are the subsets of NFA labels reachable from the set of start
    labels, numbered `q_0, q_1, ...` in breadth-first discovery order.  The
    empty subset is kept as an explicit dead state, so the result is total.

    Epsilon edges are ignored unless `epsilon_closure` is set, in which case
    every subset is closed under epsilon edges before use.
    """
    closure = _closure_fn(nfa, epsilon_closure)
    accepting = {node.label for node in nfa.get_end_nodes()}

    start = closure({node.label for node in nfa.get_start_nodes()})

    ids = Integerizer()
    ids(start)
    subsets = [start]
    edges = [[]]
    queue = deque([start])

    while queue:
        current = queue.popleft()
        i = ids(current)
        for a in alphabet:
            target = closure(move(nfa, current, a))
            j = ids(target)
            if j == len(subsets):   # first time we see this subset
                subsets.append(target)
                edges.append([])
                queue.append(target)
            edges[i].append(Edge(i, j, symbol_value(a)))

    nodes = [
        Node(
            label = f'q_{n}',
            coords = (n % 5, n // 5),
            is_start = (n == 0),
            is_end = bool(subset & accepting),
        )
        for n, subset in enumerate(subsets)
    ]

    logger.debug('subset construction: %d NFA states -> %d DFA states', len(nfa.nodes), len(nodes))
    return Automaton(nodes, edges, is_dfa=True)


def _closure_fn(nfa, enabled):
    if enabled:
        return lambda labels: frozenset(epsilon_closure(nfa, labels))
    return frozenset
