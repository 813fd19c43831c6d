"""Core package for llama-common.

Re-exports the chat transcript model so callers can write
``from llama_common import ChatHistory``.
"""

from .chat import AuthorRole, ChatHistory, Message

__all__ = ["AuthorRole", "ChatHistory", "Message"]
