from .groq import GroqClient, build_chat_messages

__all__ = ["GroqClient", "build_chat_messages"]
