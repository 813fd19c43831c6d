"""Chat transcript model and its JSON codec.

A :class:`ChatHistory` is an ordered list of :class:`Message` records, each
tagged with an :class:`AuthorRole`. Histories are only appended to, and
round-trip through JSON with :meth:`ChatHistory.to_json` and
:meth:`ChatHistory.from_json`.
"""

from .codec import decode_history, encode_history, history_from_payload, history_to_payload
from .errors import ChatHistoryError, MalformedJsonError, SchemaMismatchError, UnknownRoleNameError
from .history import AuthorRole, ChatHistory, Message

__all__ = [
    "AuthorRole",
    "ChatHistory",
    "ChatHistoryError",
    "MalformedJsonError",
    "Message",
    "SchemaMismatchError",
    "UnknownRoleNameError",
    "decode_history",
    "encode_history",
    "history_from_payload",
    "history_to_payload",
]
