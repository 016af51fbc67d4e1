"""
Activation functions applied after each network layer.

Brains default to ReLU on every layer, including the output layer, so
actuator outputs are never negative.
"""

import numpy as np
from typing import Callable, Dict

from ..exceptions import InvalidParameterError


def linear(x: np.ndarray) -> np.ndarray:
    """Identity activation - no nonlinearity."""
    return x


def relu(x: np.ndarray) -> np.ndarray:
    """Rectified Linear Unit."""
    return np.maximum(0, x)


def sigmoid(x: np.ndarray) -> np.ndarray:
    """Sigmoid - smooth, bounded (0, 1)."""
    # Clip to avoid overflow
    x = np.clip(x, -500, 500)
    return 1 / (1 + np.exp(-x))


def tanh(x: np.ndarray) -> np.ndarray:
    """Hyperbolic tangent - smooth, bounded (-1, 1)."""
    return np.tanh(x)


class Activation:
    """Named activation function."""

    def __init__(self, name: str, func: Callable[[np.ndarray], np.ndarray]):
        self.name = name
        self.func = func

    def __call__(self, x: np.ndarray) -> np.ndarray:
        return self.func(x)

    def __repr__(self):
        return f"Activation({self.name})"


ACTIVATIONS: Dict[str, Activation] = {
    'linear': Activation('linear', linear),
    'relu': Activation('relu', relu),
    'sigmoid': Activation('sigmoid', sigmoid),
    'tanh': Activation('tanh', tanh),
}


def get_activation(name: str) -> Activation:
    """Get an activation function by name."""
    if name not in ACTIVATIONS:
        available = ', '.join(ACTIVATIONS.keys())
        raise InvalidParameterError(f"Unknown activation '{name}'. Available: {available}")
    return ACTIVATIONS[name]
