"""Public container API: the freezable ``ArcticFox`` and its adapters."""

from .batch import run_many
from .cub import AdoptedCub, Cub, CubModel
from .monad import ArcticFox, FrozenFoxError, adopt, bond
from .render import FoxEnvelope, RenderedBody, ResponseSink, render, render_with_settings, respond
from .state import FoxState, Frozen, Live

__all__ = [
    "AdoptedCub",
    "ArcticFox",
    "Cub",
    "CubModel",
    "FoxEnvelope",
    "FoxState",
    "Frozen",
    "FrozenFoxError",
    "Live",
    "RenderedBody",
    "ResponseSink",
    "adopt",
    "bond",
    "render",
    "render_with_settings",
    "respond",
    "run_many",
]
