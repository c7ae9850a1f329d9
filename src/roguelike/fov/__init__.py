"""Field of view: interchangeable visibility algorithms and the tracker."""
from .algorithms import FovAlgorithm, compute_fov

__all__ = ["FovAlgorithm", "compute_fov"]
