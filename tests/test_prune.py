import pytest

from finite_automata import Automaton, Random, examples, generate_nfa, prune_unreachable_states
from finite_automata.prune import reachable_labels
from finite_automata.viz import transition_table


def test_unreachable_tail():
    m = examples.unreachable_tail()
    assert len(m) == 5

    p = prune_unreachable_states(m)
    assert [n.label for n in p.nodes] == ['q_0', 'q_1', 'q_2', 'q_3']
    assert set(p.arcs()) == {
        ('q_0', 0, 'q_1'),
        ('q_1', 1, 'q_2'),
        ('q_2', 0, 'q_3'),
        ('q_3', 1, 'q_0'),
    }
    assert [n.label for n in p.get_end_nodes()] == ['q_3']
    assert all(e.target < 4 for row in p.edges for e in row)


def test_relabels_after_gap():
    m = examples.unreachable_middle()
    assert reachable_labels(m) == {'q_0', 'q_2', 'q_3'}

    p = prune_unreachable_states(m)
    assert transition_table(p, ('0', '1')) == [
        ('q_0', ('q_1',), ()),
        ('q_1', (), ('q_2',)),
        ('q_2', ('q_0',), ()),
    ]
    assert [n.label for n in p.get_start_nodes()] == ['q_0']
    assert [n.label for n in p.get_end_nodes()] == ['q_2']


def test_keeps_flags_and_coords():
    m = generate_nfa(Random('prune'), 7, prune_unreachable=False)
    p = prune_unreachable_states(m)
    old = {n.coords: n for n in m.nodes}
    for n in p.nodes:
        o = old[n.coords]
        assert (n.is_start, n.is_end) == (o.is_start, o.is_end)
    assert p.is_dfa == m.is_dfa


def test_keeps_dfa_flag():
    p = prune_unreachable_states(examples.even_zeros())
    assert p.is_dfa
    assert p == examples.even_zeros()


def test_all_reachable_is_identity():
    m = examples.zeros_then_one_dfa()
    assert prune_unreachable_states(m) == m


def test_multiple_starts():
    m = Automaton.from_arcs(
        [('a', '0', 'b'), ('c', '0', 'd'), ('e', '0', 'a')],
        start = ['a', 'c'],
    )
    p = prune_unreachable_states(m)
    assert len(p) == 4
    assert len(p.get_start_nodes()) == 2


def test_epsilon_edges_count_for_reachability():
    p = prune_unreachable_states(examples.epsilon_then_zero())
    assert len(p) == 3


def test_no_start_states():
    m = Automaton.from_arcs([('a', '0', 'b')], stop=['b'])
    p = prune_unreachable_states(m)
    assert len(p) == 0
    assert p.edges == ()


def test_never_grows():
    for seed in range(50):
        m = generate_nfa(Random(seed), 8, prune_unreachable=False)
        p = prune_unreachable_states(m)
        assert len(p) <= len(m)
        assert reachable_labels(p) == {n.label for n in p.nodes}
        assert [n.label for n in p.nodes] == [f'q_{i}' for i in range(len(p))]
        # pruning twice changes nothing
        assert prune_unreachable_states(p) == p


def test_does_not_mutate_input():
    m = examples.unreachable_tail()
    before = m.as_tuple()
    prune_unreachable_states(m)
    assert m.as_tuple() == before


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
