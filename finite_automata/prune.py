import logging
from dataclasses import replace

from finite_automata.automaton import Automaton, Edge


logger = logging.getLogger(__name__)


def reachable_labels(automaton):
    "Labels reachable from any start state, ignoring edge symbols."
    reachable = set()
    stack = [node.label for node in automaton.get_start_nodes()]
    while stack:
        label = stack.pop()
        if label in reachable: continue
        reachable.add(label)
        for e in automaton.get_outgoing_edges(label):
            stack.append(automaton.nodes[e.target].label)
    return reachable


def prune_unreachable_states(automaton):
    """
    Drop every state that no start state reaches.

    Survivors keep their relative order and are relabelled `q_0, q_1, ...`;
    edges are remapped to the new indices.
    """
    reachable = reachable_labels(automaton)

    survivors = [i for i, node in enumerate(automaton.nodes) if node.label in reachable]
    new_index = {automaton.nodes[i].label: k for k, i in enumerate(survivors)}

    nodes = [replace(automaton.nodes[i], label=f'q_{k}') for k, i in enumerate(survivors)]
    edges = []
    for k, i in enumerate(survivors):
        row = []
        for e in automaton.edges[i]:
            target = automaton.nodes[e.target].label
            if target not in new_index: continue
            row.append(Edge(k, new_index[target], e.value))
        edges.append(row)

    logger.debug('pruned %d -> %d states', len(automaton.nodes), len(nodes))
    return Automaton(nodes, edges, is_dfa=automaton.is_dfa)
