import logging

from finite_automata.automaton import Automaton, AutomatonError, Edge, Node, matches, symbol_value
from finite_automata.determinize import convert_nfa_to_dfa
from finite_automata.prune import prune_unreachable_states


logger = logging.getLogger(__name__)


def target_label(dfa, label, symbol):
    "Target of the first `symbol` edge leaving `label`, or None."
    for e in dfa.get_outgoing_edges(label):
        if matches(e, symbol):
            return dfa.nodes[e.target].label
    return None


def refine(dfa, alphabet):
    """
    Moore's partition refinement.

    Starts from {accepting, non-accepting} and splits every block by the
    signature of its members (the block reached on each symbol, `None` for a
    missing edge) until a pass splits nothing.  Returns the list of blocks
    and the number of passes.
    """
    alphabet = list(alphabet)
    final = [n.label for n in dfa.nodes if n.is_end]
    nonfinal = [n.label for n in dfa.nodes if not n.is_end]

    P = [block for block in (final, nonfinal) if block]

    passes = 0
    changed = True
    while changed:
        changed = False
        passes += 1

        find = {q: b for b, block in enumerate(P) for q in block}

        R = []
        for block in P:
            groups = {}
            for q in block:
                signature = tuple(find.get(target_label(dfa, q, a)) for a in alphabet)
                groups.setdefault(signature, []).append(q)
            R.extend(groups.values())
            if len(groups) > 1:
                changed = True
        P = R

    return P, passes


def minimize_dfa(dfa, alphabet):
    """
    Minimal DFA equivalent to `dfa`, one state `q_i` per block of the final
    partition.

    The input should be total and deterministic.  A missing transition is
    tolerated: it is treated as its own signature value during refinement and
    produces no edge in the output.
    """
    alphabet = list(alphabet)
    if not dfa.is_total(alphabet):
        logger.warning('minimizing a DFA that is missing transitions')

    P, passes = refine(dfa, alphabet)
    find = {q: b for b, block in enumerate(P) for q in block}

    starts = dfa.get_start_nodes()
    start = starts[0].label if starts else None

    nodes = []
    edges = []
    for i, block in enumerate(P):
        rep = block[0]
        nodes.append(Node(
            label = f'q_{i}',
            coords = dfa.nodes[dfa.index(rep)].coords,
            is_start = start in block,
            is_end = any(dfa.nodes[dfa.index(q)].is_end for q in block),
        ))
        row = []
        for a in alphabet:
            t = target_label(dfa, rep, a)
            if t is None: continue
            row.append(Edge(i, find[t], symbol_value(a)))
        edges.append(row)

    logger.debug('minimized %d -> %d states in %d passes', len(dfa.nodes), len(nodes), passes)
    return Automaton(nodes, edges, is_dfa=True)


def is_isomorphic(a, b, alphabet):
    """
    Is there a bijection between the states of DFAs `a` and `b` preserving
    the start state, acceptance and transitions?  Both machines are assumed
    to have no unreachable states.
    """
    if len(a.nodes) != len(b.nodes): return False

    sa = a.get_start_nodes()
    sb = b.get_start_nodes()
    if len(sa) > 1 or len(sb) > 1:
        raise AutomatonError('isomorphism test needs at most one start state per machine')
    if not sa or not sb:
        return not sa and not sb

    p, q = sa[0].label, sb[0].label
    iso = {p: q}
    stack = [(p, q)]
    done = set()
    while stack:
        (p, q) = stack.pop()
        if (p, q) in done: continue
        done.add((p, q))

        if a.nodes[a.index(p)].is_end != b.nodes[b.index(q)].is_end:
            return False

        for x in alphabet:
            r = target_label(a, p, x)
            s = target_label(b, q, x)

            # presence of the arc has to be the same
            if (r is None) != (s is None):
                return False
            if r is None:
                continue

            if iso.setdefault(r, s) != s:
                return False
            stack.append((r, s))

    return len(iso) == len(a.nodes) and len(set(iso.values())) == len(iso)


def canonical_dfa(automaton, alphabet, epsilon_closure=False):
    "Minimal DFA with no unreachable states for the language of `automaton`."
    m = prune_unreachable_states(automaton)
    if not m.is_deterministic(alphabet):
        m = convert_nfa_to_dfa(m, alphabet, epsilon_closure=epsilon_closure)
    return prune_unreachable_states(minimize_dfa(m, alphabet))


def equivalent(a, b, alphabet, epsilon_closure=False):
    "Do `a` and `b` accept the same language over `alphabet`?"
    return is_isomorphic(
        canonical_dfa(a, alphabet, epsilon_closure),
        canonical_dfa(b, alphabet, epsilon_closure),
        alphabet,
    )


def minimal_state_count(automaton, alphabet, epsilon_closure=False):
    "Number of states of the minimal DFA, determinizing first if needed."
    return len(canonical_dfa(automaton, alphabet, epsilon_closure).nodes)
