from .engine import SessionEngine
from .rate_gate import RateGate
from .framing import UtteranceBuffer
from .history import ConversationContext

__all__ = ["ConversationContext", "RateGate", "SessionEngine", "UtteranceBuffer"]
