from models.session import GameSession

__all__ = ["GameSession"]
