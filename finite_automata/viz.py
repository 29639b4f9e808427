"""
Display utilities for automata (Graphviz rendering, transition tables, HTML
tables for notebooks).
"""
import html as _html
from collections import defaultdict

from arsenal import Integerizer
from graphviz import Digraph
from IPython.display import HTML, display

from finite_automata.automaton import EPSILON, matches


def _fmt_value(value):
    return 'ε' if value is EPSILON else str(value)


def to_graphviz(automaton, fmt_node=lambda node: node.label, sty_node=lambda node: {}, positions=False):
    """
    Render `automaton` as a `graphviz.Digraph`.

    Start states get an incoming arrow from an invisible point, accepting
    states a double border.  Parallel edges are drawn once with stacked
    labels.  With `positions=True`, node coordinates are passed on as pinned
    `pos` hints (honoured by the neato/fdp engines).
    """
    g = Digraph(
        graph_attr=dict(rankdir='LR'),
        node_attr=dict(
            fontname='Monospace',
            fontsize='8',
            height='.05', width='.05',
            margin="0.055,0.042",
            shape='circle',
        ),
        edge_attr=dict(
            arrowsize='0.3',
            fontname='Monospace',
            fontsize='8',
        ),
    )

    f = Integerizer()

    for node in automaton.get_start_nodes():
        start_id = f'<start_{f(node.label)}>'
        g.node(start_id, label='', shape='point', height='0', width='0')
        g.edge(start_id, str(f(node.label)), label='')

    for node in automaton.nodes:
        sty = dict(peripheries='2' if node.is_end else '1')
        if positions:
            x, y = node.coords
            sty['pos'] = f'{x},{y}!'
        sty.update(sty_node(node))
        g.node(str(f(node.label)), label=_html.escape(str(fmt_node(node))), **sty)

    by_pair = defaultdict(list)
    for i, a, j in automaton.arcs():
        by_pair[(str(f(i)), str(f(j)))].append(_html.escape(_fmt_value(a)))

    for (u, v), labels in by_pair.items():
        g.edge(u, v, label='\n'.join(sorted(labels)))

    return g


def transition_table(automaton, alphabet):
    """
    Rows `(label, targets_0, targets_1, ...)` with one tuple of target labels
    per symbol of `alphabet`; an empty tuple means no transition.
    """
    rows = []
    for node in automaton.nodes:
        row = [node.label]
        for a in alphabet:
            row.append(tuple(automaton.nodes[e.target].label
                             for e in automaton.get_outgoing_edges(node) if matches(e, a)))
        rows.append(tuple(row))
    return rows


def _as_html_cell(x):
    if isinstance(x, HTML):
        return x.data
    if hasattr(x, '_repr_mimebundle_'):
        bundle = x._repr_mimebundle_(include=['image/svg+xml'])
        if isinstance(bundle, tuple):
            bundle = bundle[0]
        if isinstance(bundle, dict) and 'image/svg+xml' in bundle:
            return str(bundle['image/svg+xml'])
    if isinstance(x, tuple):
        x = '{%s}' % ', '.join(map(str, x)) if x else '∅'
    return f'<pre>{_html.escape(str(x))}</pre>'


def format_table(rows, headings=None):
    head_html = ""
    if headings:
        head_cells = "".join(f"<th>{_html.escape(str(h))}</th>" for h in headings)
        head_html = f"<thead><tr>{head_cells}</tr></thead>"

    body_rows = []
    for row in rows:
        cells = "".join(f'<td style="vertical-align:top">{_as_html_cell(x)}</td>' for x in row)
        body_rows.append(f"<tr>{cells}</tr>")
    body_html = "<tbody>" + "".join(body_rows) + "</tbody>"

    return (
        '<table class="fmt-table" style="border-collapse:collapse;">'
        f"{head_html}{body_html}"
        "</table>"
    )


def display_table(rows, **kwargs):
    display(HTML(format_table(rows, **kwargs)))


def display_transition_table(automaton, alphabet):
    display_table(transition_table(automaton, alphabet), headings=['q', *alphabet])
