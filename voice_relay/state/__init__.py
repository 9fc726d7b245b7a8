from .runtime import RuntimeDeps
from .settings import AppSettings, SessionSettings
from .session import SessionPhase, ConversationTurn

__all__ = ["AppSettings", "ConversationTurn", "RuntimeDeps", "SessionPhase", "SessionSettings"]
