from backend.engine.gameplay.game import GamePlay, Outcome

__all__ = ["GamePlay", "Outcome"]
