from dataclasses import dataclass


DEFAULT_ALPHABET = ('0', '1')


@dataclass(frozen=True)
class GeneratorConfig:
    "Parameters of the random automaton generator."
    alphabet: tuple = DEFAULT_ALPHABET
    edge_chance: float = 0.5
    self_loop_chance: float = 0.2
    epsilon_chance: float = 0.1
    multi_start_chance: float = 0.3
    prune_unreachable: bool = True

    def generate(self, random, size, is_dfa):
        from finite_automata.generate import generate_finite_automaton
        return generate_finite_automaton(
            random,
            size,
            alphabet = self.alphabet,
            is_dfa = is_dfa,
            edge_chance = self.edge_chance,
            self_loop_chance = self.self_loop_chance,
            epsilon_chance = self.epsilon_chance,
            multi_start_chance = self.multi_start_chance,
            prune_unreachable = self.prune_unreachable,
        )


NFA_DEFAULTS = GeneratorConfig()

# edges of a DFA come from the one-target-per-symbol construction, so the
# NFA-only chances are unused
DFA_DEFAULTS = GeneratorConfig(edge_chance=0.0, epsilon_chance=0.0, multi_start_chance=0.0)
