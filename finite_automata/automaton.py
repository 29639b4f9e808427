from dataclasses import dataclass


EPSILON = None


class AutomatonError(ValueError):
    "Malformed automaton, or an automaton that cannot support the requested operation."


def symbol_value(symbol):
    """
    Value stored on an edge for `symbol`.  Canonical decimal strings become
    ints; anything that would not print back as itself (`'01'`, `'²'`) stays
    a string, so `matches` always finds the edge again.
    """
    if isinstance(symbol, str) and symbol.isdecimal() and str(int(symbol)) == symbol:
        return int(symbol)
    return symbol


def matches(edge, symbol):
    return edge.value is not EPSILON and str(edge.value) == symbol


@dataclass(frozen=True)
class Node:
    label: str
    coords: tuple = (0.0, 0.0)
    is_start: bool = False
    is_end: bool = False


@dataclass(frozen=True)
class Edge:
    source: int
    target: int
    value: object = EPSILON

    @property
    def is_epsilon(self):
        return self.value is EPSILON


class Automaton:
    """
    Finite automaton stored as a node list with a parallel adjacency list:
    `edges[i]` holds exactly the outgoing edges of `nodes[i]`.

    Instances are immutable; every transformation in this package returns a
    new automaton.
    """

    directed = True
    weighted = True

    def __init__(self, nodes, edges, is_dfa=False):
        nodes = tuple(nodes)
        edges = tuple(tuple(row) for row in edges)

        if len(nodes) != len(edges):
            raise AutomatonError(f'{len(nodes)} nodes but {len(edges)} edge rows')

        index = {}
        for i, node in enumerate(nodes):
            if node.label in index:
                raise AutomatonError(f'duplicate label {node.label!r}')
            index[node.label] = i

        for i, row in enumerate(edges):
            for e in row:
                if e.source != i:
                    raise AutomatonError(f'edge {e} stored in row {i}')
                if not 0 <= e.target < len(nodes):
                    raise AutomatonError(f'edge {e} points outside the automaton')

        self._nodes = nodes
        self._edges = edges
        self._index = index
        self._is_dfa = bool(is_dfa)

    @property
    def nodes(self):
        return self._nodes

    @property
    def edges(self):
        return self._edges

    @property
    def is_dfa(self):
        return self._is_dfa

    def __len__(self):
        return len(self._nodes)

    def as_tuple(self):
        return (self._nodes, self._edges, self._is_dfa)

    def __hash__(self):
        return hash(self.as_tuple())

    def __eq__(self, other):
        if not isinstance(other, Automaton):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        x = ['{']
        for node in self._nodes:
            ss = node.label
            if node.is_start:
                ss = f'^{ss}'
            if node.is_end:
                ss = f'{ss}$'
            x.append(f'  {ss}:')
            for _, a, t in self.arcs(node.label):
                x.append(f'    {"ε" if a is EPSILON else a} -> {t}')
        x.append('}')
        return '\n'.join(x)

    def _repr_mimebundle_(self, *args, **kwargs):
        return self.graphviz()._repr_mimebundle_(*args, **kwargs)

    def graphviz(self, **kwargs):
        from finite_automata.viz import to_graphviz
        return to_graphviz(self, **kwargs)

    #___________________________________________________________________________
    # Queries

    def index(self, label):
        return self._index.get(label)

    def get_start_nodes(self):
        return [node for node in self._nodes if node.is_start]

    def get_end_nodes(self):
        return [node for node in self._nodes if node.is_end]

    def get_outgoing_edges(self, node):
        """
        Outgoing edges of `node` (a `Node` or a label), resolved by label
        against this automaton.  Unknown labels have no outgoing edges.
        """
        label = node.label if isinstance(node, Node) else node
        i = self._index.get(label)
        return () if i is None else self._edges[i]

    def arcs(self, label=None):
        """
        Iterate `(source_label, value, target_label)` triples, over every
        state or only `label`; an unknown label yields nothing.
        """
        if label is None:
            rows = range(len(self._nodes))
        else:
            i = self._index.get(label)
            rows = [] if i is None else [i]
        for i in rows:
            for e in self._edges[i]:
                yield (self._nodes[i].label, e.value, self._nodes[e.target].label)

    def step(self, label, symbol):
        "Labels reachable from `label` by one `symbol` edge."
        return [self._nodes[e.target].label
                for e in self.get_outgoing_edges(label) if matches(e, symbol)]

    def is_deterministic(self, alphabet):
        "Exactly one start state, no epsilon edges and one edge per symbol per state."
        if len(self.get_start_nodes()) != 1:
            return False
        alphabet = list(alphabet)
        for row in self._edges:
            if any(e.is_epsilon for e in row):
                return False
            for a in alphabet:
                if sum(1 for e in row if matches(e, a)) != 1:
                    return False
        return True

    def is_total(self, alphabet):
        "Every state has at least one edge on every symbol."
        return all(any(matches(e, a) for e in row)
                   for row in self._edges for a in alphabet)

    #___________________________________________________________________________
    # Construction

    @classmethod
    def from_arcs(cls, arcs=(), start=(), stop=(), states=(), is_dfa=False):
        """
        Build an automaton from `(label, symbol, label)` triples.

        Node order is `states`, then first appearance in `start`, `arcs` and
        `stop`.  A symbol of `EPSILON` makes an epsilon edge.
        """
        arcs = list(arcs)
        order = {}
        def see(q):
            if q not in order:
                order[q] = len(order)
        for q in states: see(q)
        for q in start: see(q)
        for i, _, j in arcs:
            see(i); see(j)
        for q in stop: see(q)

        start = set(start)
        stop = set(stop)
        nodes = [Node(label=q, is_start=q in start, is_end=q in stop) for q in order]
        edges = [[] for _ in nodes]
        for i, a, j in arcs:
            value = EPSILON if a is EPSILON else symbol_value(a)
            edges[order[i]].append(Edge(order[i], order[j], value))

        return cls(nodes, edges, is_dfa=is_dfa)
