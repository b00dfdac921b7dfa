"""Per-key actors: the registry that holds them, Model, View and Controller."""

from .controller import Controller
from .model import Model
from .registry import CoreRegistry, MultitonActor
from .view import View

__all__ = ["Controller", "CoreRegistry", "Model", "MultitonActor", "View"]
