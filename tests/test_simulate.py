import pytest

from finite_automata import (
    Automaton, AutomatonError, Random, behaves_same_from_state, convert_nfa_to_dfa, examples,
    generate_nfa, generate_words, is_word_accepted, minimize_dfa, myhill_nerode_equivalent,
    simulate_from, syntactically_congruent,
)


ALPHABET = ('0', '1')


class TestSimulateFrom:

    def test_follows_edges(self):
        dfa = examples.zeros_then_one_dfa()
        assert simulate_from(dfa, 'q_0', '') == 'q_0'
        assert simulate_from(dfa, 'q_0', '0') == 'q_1'
        assert simulate_from(dfa, 'q_0', '001') == 'q_3'
        assert simulate_from(dfa, 'q_0', '0010') == 'q_2'
        assert simulate_from(dfa, 'q_1', '1') == 'q_3'

    def test_symbol_sequence(self):
        dfa = examples.zeros_then_one_dfa()
        assert simulate_from(dfa, 'q_0', ['0', '1']) == 'q_3'

    def test_unknown_label(self):
        dfa = examples.zeros_then_one_dfa()
        assert simulate_from(dfa, 'nope', '01') is None
        assert simulate_from(dfa, 'nope', '') is None

    def test_leading_zero_symbol(self):
        m = Automaton.from_arcs(
            [('p', '01', 'q'), ('p', '1', 'p'), ('q', '01', 'q'), ('q', '1', 'p')],
            start = ['p'],
            stop = ['q'],
        )
        assert simulate_from(m, 'p', ['01']) == 'q'
        assert simulate_from(m, 'p', ['01', '1']) == 'p'
        assert is_word_accepted(m, ['1', '01'])
        assert not is_word_accepted(m, ['01', '1'])

    def test_missing_edge(self):
        m = examples.zeros_then_one()
        assert simulate_from(m, 'q_1', '0') is None
        assert simulate_from(m, 'q_2', '1') is None
        assert simulate_from(m, 'q_0', '2') is None


class TestIsWordAccepted:

    def test_dfa(self):
        dfa = examples.even_zeros()
        assert is_word_accepted(dfa, '')
        assert is_word_accepted(dfa, '1001')
        assert not is_word_accepted(dfa, '10')

    def test_nfa(self):
        m = examples.zeros_then_one()
        assert is_word_accepted(m, '01')
        assert is_word_accepted(m, '0001')
        assert not is_word_accepted(m, '1')
        assert not is_word_accepted(m, '011')
        assert not is_word_accepted(m, '')

    def test_multiple_starts(self):
        m = examples.two_starts()
        assert is_word_accepted(m, 'a')
        assert is_word_accepted(m, 'b')
        assert not is_word_accepted(m, 'ba')

    def test_no_start_states(self):
        m = Automaton.from_arcs([('p', '0', 'q')], stop=['q'])
        with pytest.raises(AutomatonError):
            is_word_accepted(m, '0')

    def test_epsilon(self):
        m = examples.epsilon_then_zero()
        assert not is_word_accepted(m, '0')
        assert is_word_accepted(m, '0', epsilon_closure=True)
        assert not is_word_accepted(m, '', epsilon_closure=True)

    def test_epsilon_into_accepting(self):
        m = Automaton.from_arcs([('a', None, 'b')], start=['a'], stop=['b'])
        assert not is_word_accepted(m, '')
        assert is_word_accepted(m, '', epsilon_closure=True)


class TestCongruence:

    def test_myhill_nerode(self):
        dfa = minimize_dfa(examples.even_zeros(), ALPHABET)
        assert myhill_nerode_equivalent(dfa, '00', '')
        assert myhill_nerode_equivalent(dfa, '010', '1100')
        assert not myhill_nerode_equivalent(dfa, '0', '')

    def test_syntactic(self):
        dfa = minimize_dfa(examples.even_zeros(), ALPHABET)
        assert syntactically_congruent(dfa, '00', '')
        assert syntactically_congruent(dfa, '1', '')
        assert not syntactically_congruent(dfa, '0', '1')

    def test_syntactic_is_finer(self):
        # `1` and `11` both lead from the start state to the dead state, but
        # from {q_0, q_1} one `1` accepts while two do not
        dfa = minimize_dfa(convert_nfa_to_dfa(examples.zeros_then_one(), ALPHABET), ALPHABET)
        assert myhill_nerode_equivalent(dfa, '1', '11')
        assert not syntactically_congruent(dfa, '1', '11')
        assert syntactically_congruent(dfa, '0', '00')

    def test_behaves_same_from_state(self):
        dfa = examples.zeros_then_one_dfa()
        assert behaves_same_from_state(dfa, 'q_1', '0', '00')
        assert not behaves_same_from_state(dfa, 'q_1', '1', '11')

    def test_no_start_states(self):
        with pytest.raises(AutomatonError):
            myhill_nerode_equivalent(Automaton([], []), '0', '1')

    def test_consistent_with_acceptance(self):
        # Myhill-Nerode equivalent words agree on every suffix
        for seed in range(20):
            nfa = generate_nfa(Random(seed), 5, epsilon_chance=0.0)
            dfa = minimize_dfa(convert_nfa_to_dfa(nfa, ALPHABET), ALPHABET)
            w1, w2 = generate_words(Random(seed), 2, 2, 4, ALPHABET)
            if myhill_nerode_equivalent(dfa, w1, w2):
                for x in ['', '0', '1', '01', '10', '11']:
                    assert is_word_accepted(nfa, w1 + x) == is_word_accepted(nfa, w2 + x)


def test_generate_words():
    ws = generate_words(Random('words'), 50, 2, 4, ALPHABET)
    assert len(ws) == 50
    assert all(2 <= len(w) <= 4 for w in ws)
    assert all(set(w) <= set(ALPHABET) for w in ws)
    assert ws == generate_words(Random('words'), 50, 2, 4, ALPHABET)
    assert {len(w) for w in ws} == {2, 3, 4}


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
