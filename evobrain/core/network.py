"""
Feed-forward neural network with a flat, ordered weight encoding.

A Network is a stack of dense layers described by a topology: one
LayerTopology per layer of neurons, input layer first. It is never
trained by gradient descent; its weights come either from a random
initialization or from a flat weight vector (a chromosome).

Flat weight order (shared by weights() and from_weights()):
    for each layer, input side first:
        for each neuron of that layer:
            bias, then one weight per neuron of the previous layer

Example for topology [2, 1]:
    [b0, w00, w10]   where wij connects input i to neuron j
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np

from ..exceptions import InvalidParameterError, LengthMismatchError
from .activations import Activation, get_activation


WEIGHT_DTYPE = np.float32


@dataclass(frozen=True)
class LayerTopology:
    """Number of neurons in one layer."""
    neurons: int


@dataclass
class Layer:
    """
    Dense layer.

    Attributes:
        weights: Array of shape (n_inputs, n_outputs)
        biases: Array of shape (n_outputs,)
    """
    weights: np.ndarray
    biases: np.ndarray

    @property
    def n_inputs(self) -> int:
        return self.weights.shape[0]

    @property
    def n_outputs(self) -> int:
        return self.weights.shape[1]

    def flatten(self) -> np.ndarray:
        """Per neuron: bias followed by its incoming weights."""
        return np.column_stack([self.biases, self.weights.T]).ravel()

    @classmethod
    def unflatten(cls, flat: np.ndarray, n_inputs: int, n_outputs: int) -> 'Layer':
        block = flat.reshape(n_outputs, n_inputs + 1)
        return cls(
            weights=np.ascontiguousarray(block[:, 1:].T),
            biases=block[:, 0].copy(),
        )


def _check_topology(topology: Sequence[LayerTopology]) -> None:
    if len(topology) < 2:
        raise InvalidParameterError(
            f"A network needs at least an input and an output layer, got {len(topology)} layer(s)"
        )
    for layer in topology:
        if layer.neurons < 0:
            raise InvalidParameterError(f"Layer size must be non-negative, got {layer.neurons}")


class Network:
    """
    Feed-forward network of dense layers.

    Every layer computes activation(inputs @ W + b). The same activation
    is used on all layers.
    """

    def __init__(self, layers: List[Layer], activation: str = 'relu'):
        self.layers = layers
        self.activation: Activation = get_activation(activation)

    @staticmethod
    def weight_count(topology: Sequence[LayerTopology]) -> int:
        """Total number of biases and weights required by a topology."""
        _check_topology(topology)
        return sum(
            (prev.neurons + 1) * layer.neurons
            for prev, layer in zip(topology, topology[1:])
        )

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        topology: Sequence[LayerTopology],
        activation: str = 'relu',
    ) -> 'Network':
        """Network with every bias and weight drawn uniformly from [-1, 1]."""
        _check_topology(topology)

        layers = []
        for prev, layer in zip(topology, topology[1:]):
            flat = rng.uniform(-1.0, 1.0, size=(prev.neurons + 1) * layer.neurons)
            layers.append(Layer.unflatten(flat.astype(WEIGHT_DTYPE), prev.neurons, layer.neurons))

        return cls(layers, activation=activation)

    @classmethod
    def from_weights(
        cls,
        topology: Sequence[LayerTopology],
        weights: Iterable[float],
        activation: str = 'relu',
    ) -> 'Network':
        """
        Rebuild a network from a flat weight vector.

        Args:
            topology: Layer sizes, input layer first
            weights: Flat weights in the order produced by weights()
            activation: Name of the activation used on every layer

        Raises:
            LengthMismatchError: if the number of weights does not match
                the topology
        """
        flat = np.fromiter(weights, dtype=WEIGHT_DTYPE)
        expected = cls.weight_count(topology)
        if len(flat) != expected:
            raise LengthMismatchError(
                f"Topology requires {expected} weights, got {len(flat)}"
            )

        layers = []
        offset = 0
        for prev, layer in zip(topology, topology[1:]):
            size = (prev.neurons + 1) * layer.neurons
            layers.append(Layer.unflatten(flat[offset:offset + size], prev.neurons, layer.neurons))
            offset += size

        return cls(layers, activation=activation)

    def weights(self) -> np.ndarray:
        """Flatten all biases and weights into one float32 vector."""
        if not self.layers:
            return np.zeros(0, dtype=WEIGHT_DTYPE)
        return np.concatenate([layer.flatten() for layer in self.layers]).astype(WEIGHT_DTYPE)

    @property
    def topology(self) -> List[LayerTopology]:
        if not self.layers:
            return []
        return [LayerTopology(self.layers[0].n_inputs)] + [
            LayerTopology(layer.n_outputs) for layer in self.layers
        ]

    def propagate(self, inputs: Iterable[float]) -> np.ndarray:
        """
        Forward pass for a single input vector.

        Args:
            inputs: One value per neuron of the input layer

        Returns:
            One value per neuron of the output layer
        """
        current = np.fromiter(inputs, dtype=WEIGHT_DTYPE)
        if self.layers and len(current) != self.layers[0].n_inputs:
            raise LengthMismatchError(
                f"Network expects {self.layers[0].n_inputs} inputs, got {len(current)}"
            )

        for layer in self.layers:
            current = self.activation(current @ layer.weights + layer.biases)
        return current

    def __repr__(self):
        arch = "→".join(str(t.neurons) for t in self.topology)
        return f"Network(arch={arch}, activation={self.activation.name}, params={len(self.weights())})"
