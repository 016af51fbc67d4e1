"""Feed-forward networks evolved through their flat weight vectors."""

from .network import Network, Layer, LayerTopology
from .activations import ACTIVATIONS, get_activation

__all__ = [
    'Network',
    'Layer',
    'LayerTopology',
    'ACTIVATIONS',
    'get_activation',
]
