"""cooldown: a tick-driven countdown timer for real-time simulations."""

from cooldown.core.cooldown import Cooldown, CooldownState

__all__ = ["Cooldown", "CooldownState", "__version__"]

__version__ = "0.1.0"
