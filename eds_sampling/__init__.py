"""
EDS Sampling - 局部自适应EDS构造

在旋转并归一化的坐标系中，用贪心算法为点云构造 epsilon 可区分集合（EDS）。
"""

__version__ = "0.1.0"

from .exceptions import EDSError, InvalidInputError, NumericalError
from .normalizer import Normalizer
from .decorrelator import Decorrelator
from .greedy_selector import GreedySelector
from .inverse_transformer import InverseTransformer
from .pipeline_controller import (
    DEFAULT_CONFIG,
    EDSResult,
    PipelineController,
    locally_adaptive_eds,
    uniform_eds,
)
from .data_loader import DataLoader
from .visualization import save_visualization

__all__ = [
    'EDSError',
    'InvalidInputError',
    'NumericalError',
    'Normalizer',
    'Decorrelator',
    'GreedySelector',
    'InverseTransformer',
    'DEFAULT_CONFIG',
    'EDSResult',
    'PipelineController',
    'locally_adaptive_eds',
    'uniform_eds',
    'DataLoader',
    'save_visualization',
]
