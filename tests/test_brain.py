"""
Tests for networks and the brain adapter.

Run with: python -m pytest tests/test_brain.py -v
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from evobrain.exceptions import InvalidParameterError, LengthMismatchError
from evobrain.core.activations import get_activation, relu, sigmoid
from evobrain.core.network import LayerTopology, Network
from evobrain.brain import Brain, BrainIndividual, Eye
from evobrain.evolution.chromosome import Chromosome
from evobrain.evolution.engine import EvolutionConfig


def topology(*sizes):
    return [LayerTopology(neurons=n) for n in sizes]


class TestActivations:
    """Tests for activation lookup."""

    def test_relu(self):
        np.testing.assert_array_equal(relu(np.array([-1.0, 0.0, 2.0])), [0.0, 0.0, 2.0])

    def test_sigmoid_is_bounded(self):
        out = sigmoid(np.array([-1000.0, 0.0, 1000.0]))

        assert out[1] == pytest.approx(0.5)
        assert np.all((out >= 0) & (out <= 1))

    def test_unknown_activation(self):
        with pytest.raises(InvalidParameterError):
            get_activation('softmax')

    def test_registered_activations_are_named_callables(self):
        for name in ['linear', 'relu', 'sigmoid', 'tanh']:
            activation = get_activation(name)

            assert activation.name == name
            assert repr(activation) == f"Activation({name})"
            assert activation(np.array([0.0])).shape == (1,)


class TestNetwork:
    """Tests for the feed-forward network."""

    def test_weight_count(self):
        # (3 inputs + bias) * 6 + (6 inputs + bias) * 2
        assert Network.weight_count(topology(3, 6, 2)) == 38

    def test_weight_order(self):
        """Per neuron: bias first, then one weight per input."""
        network = Network.from_weights(
            topology(2, 2),
            [0.1, 1.0, 2.0, 0.2, 3.0, 4.0],
            activation='linear',
        )

        np.testing.assert_allclose(network.layers[0].biases, [0.1, 0.2], rtol=1e-6)
        np.testing.assert_allclose(network.layers[0].weights, [[1.0, 3.0], [2.0, 4.0]])
        np.testing.assert_allclose(network.propagate([1.0, 10.0]), [21.1, 43.2], rtol=1e-6)

    def test_propagate_multiple_layers(self):
        network = Network.from_weights(
            topology(3, 2, 1),
            [
                # Layer 1
                0.0, 0.1, 0.2, 0.3,
                0.0, -0.4, -0.5, -0.6,
                # Layer 2
                0.5, 1.0, 1.0,
            ],
        )

        # Neuron 1: relu(0.1 + 0.4 + 0.9) = 1.4; neuron 2: relu(-3.2) = 0
        np.testing.assert_allclose(network.propagate([1.0, 2.0, 3.0]), [1.9], rtol=1e-6)

    def test_weights_round_trip(self):
        rng = np.random.default_rng(0)
        network = Network.random(rng, topology(3, 6, 2))

        weights = network.weights()
        rebuilt = Network.from_weights(topology(3, 6, 2), weights)

        assert weights.dtype == np.float32
        assert len(weights) == 38
        np.testing.assert_array_equal(rebuilt.weights(), weights)

    def test_random_weights_in_range(self):
        network = Network.random(np.random.default_rng(1), topology(4, 8, 2))

        weights = network.weights()
        assert np.all((weights >= -1.0) & (weights <= 1.0))

    def test_random_is_deterministic(self):
        a = Network.random(np.random.default_rng(2), topology(3, 4, 2))
        b = Network.random(np.random.default_rng(2), topology(3, 4, 2))

        np.testing.assert_array_equal(a.weights(), b.weights())

    def test_topology_property(self):
        network = Network.random(np.random.default_rng(0), topology(3, 6, 2))

        assert network.topology == topology(3, 6, 2)

    def test_weight_count_mismatch(self):
        with pytest.raises(LengthMismatchError):
            Network.from_weights(topology(2, 2), [0.0] * 5)
        with pytest.raises(LengthMismatchError):
            Network.from_weights(topology(2, 2), [0.0] * 7)

    def test_input_width_mismatch(self):
        network = Network.random(np.random.default_rng(0), topology(3, 2))

        with pytest.raises(LengthMismatchError):
            network.propagate([1.0, 2.0])

    def test_single_layer_topology(self):
        with pytest.raises(InvalidParameterError):
            Network.random(np.random.default_rng(0), topology(3))


class TestBrain:
    """Tests for the chromosome/network adapter."""

    def test_topology(self):
        assert Brain.topology(Eye(cells=9)) == topology(9, 18, 2)

    def test_chromosome_length(self):
        brain = Brain.random(np.random.default_rng(0), Eye(cells=3))

        assert len(brain.as_chromosome()) == 38

    def test_chromosome_round_trip(self):
        eye = Eye(cells=3)
        brain = Brain.random(np.random.default_rng(0), eye)

        chromosome = brain.as_chromosome()
        rebuilt = Brain.from_chromosome(chromosome, eye)

        assert rebuilt.as_chromosome() == chromosome

    def test_chromosome_order_matches_network_weights(self):
        brain = Brain.random(np.random.default_rng(4), Eye(cells=2))

        np.testing.assert_array_equal(brain.as_chromosome().genes, brain.network.weights())

    def test_wrong_chromosome_length(self):
        with pytest.raises(LengthMismatchError):
            Brain.from_chromosome(Chromosome([0.0] * 37), Eye(cells=3))

    def test_propagate(self):
        eye = Eye(cells=4)
        brain = Brain.random(np.random.default_rng(0), eye)

        out = brain.propagate([0.0, 0.5, 1.0, 0.25])

        assert out.shape == (2,)
        assert np.all(out >= 0)

    def test_any_object_with_cells_is_a_sensor(self):
        class Antenna:
            cells = 2

        brain = Brain.random(np.random.default_rng(0), Antenna())

        assert len(brain.as_chromosome()) == Network.weight_count(topology(2, 4, 2))


class TestBrainEvolution:
    """Integration tests evolving brains."""

    def test_brain_individual(self):
        eye = Eye(cells=2)
        brain = Brain.random(np.random.default_rng(0), eye)

        individual = BrainIndividual.from_brain(brain, fitness=3.0)

        assert individual.fitness() == 3.0
        assert individual.chromosome() == brain.as_chromosome()
        assert individual.into_brain(eye).as_chromosome() == brain.as_chromosome()

    def test_created_individuals_start_unscored(self):
        individual = BrainIndividual.create(Chromosome([1.0, 2.0]))

        assert individual.fitness() == 0.0

    def test_evolve_brains(self):
        config = EvolutionConfig(population_size=6, mutation_chance=0.1, mutation_coeff=0.3, eye_cells=3)
        eye = Eye(cells=config.eye_cells)
        rng = np.random.default_rng(0)

        population = [
            BrainIndividual.from_brain(Brain.random(rng, eye), fitness=float(i + 1))
            for i in range(config.population_size)
        ]

        ga = config.build_algorithm()
        new_population, stats = ga.evolve(rng, population)

        assert len(new_population) == config.population_size
        assert stats.min_fitness == 1.0
        assert stats.max_fitness == 6.0
        assert stats.avg_fitness == pytest.approx(3.5)

        for individual in new_population:
            assert isinstance(individual, BrainIndividual)
            brain = individual.into_brain(eye)
            assert brain.propagate([0.1, 0.2, 0.3]).shape == (2,)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
