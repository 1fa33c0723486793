from .state import GameSession, NoActiveRound, SessionSnapshot, Submission

__all__ = ["GameSession", "NoActiveRound", "SessionSnapshot", "Submission"]
