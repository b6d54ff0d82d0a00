"""Game domain services.

Pure game rules, imported by the guarded store. Nothing in here touches
storage, locks or HTTP.
"""

from .engine import start_game, apply_guess

__all__ = ['start_game', 'apply_guess']
