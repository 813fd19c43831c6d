"""JSON codec for :class:`~llama_common.chat.history.ChatHistory`.

Wire format::

    {
      "messages": [
        {"author_role": "User", "content": "hi"}
      ]
    }

Keys are snake_case independent of the in-memory attribute names and the
role travels as its member name, never its number. Decoding either returns
a complete history or raises a :class:`ChatHistoryError` subclass.
"""

from __future__ import annotations

import json
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from llama_common.logging import get_logger

from .errors import MalformedJsonError, SchemaMismatchError, UnknownRoleNameError
from .history import AuthorRole, ChatHistory, Message

logger = get_logger(__file__)


class MessagePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    author_role: StrictStr
    content: StrictStr


class ChatHistoryPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # null and a missing key both mean "no messages"
    messages: Optional[List[MessagePayload]] = None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _schema_error(exc: ValidationError) -> SchemaMismatchError:
    first = exc.errors()[0]
    return SchemaMismatchError(first["msg"], location=tuple(first["loc"]))


def history_to_payload(history: ChatHistory) -> dict[str, Any]:
    """Return the wire representation of ``history`` as plain Python data."""

    return {
        "messages": [
            {"author_role": AuthorRole(m.author_role).name, "content": m.content}
            for m in history.messages
        ]
    }


def history_from_payload(data: Any) -> ChatHistory:
    """Build a history from already parsed JSON data.

    Raises
    ------
    SchemaMismatchError
        ``data`` is not shaped like a chat history.
    UnknownRoleNameError
        A message names a role that does not exist.
    """

    if not isinstance(data, dict):
        raise SchemaMismatchError(f"expected a JSON object, got {type(data).__name__}")
    try:
        payload = ChatHistoryPayload.model_validate(data)
    except ValidationError as exc:
        raise _schema_error(exc) from exc

    messages = []
    for index, entry in enumerate(payload.messages or ()):
        try:
            role = AuthorRole.from_name(entry.author_role)
        except UnknownRoleNameError as exc:
            raise UnknownRoleNameError(
                exc.role_name, location=("messages", index, "author_role")
            ) from None
        messages.append(Message(role, entry.content))
    return ChatHistory(messages)


def encode_history(history: ChatHistory) -> str:
    """Serialize ``history`` to indented JSON text.

    Non-ASCII text is written as is. Lone surrogates survive in the returned
    ``str``; encode with ``backslashreplace`` to store them as JSON escapes.
    """

    return json.dumps(history_to_payload(history), indent=2, ensure_ascii=False)


def decode_history(text: str | bytes) -> ChatHistory:
    """Parse JSON text produced by :func:`encode_history`.

    Raises
    ------
    MalformedJsonError
        ``text`` is not valid JSON.
    SchemaMismatchError
        The JSON is not shaped like a chat history.
    UnknownRoleNameError
        A message names a role that does not exist.
    """

    if not isinstance(text, (str, bytes, bytearray)):
        raise MalformedJsonError(f"expected JSON text, got {type(text).__name__}")
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.debug("rejected malformed chat history JSON: %s", exc)
        raise MalformedJsonError(str(exc)) from exc

    try:
        history = history_from_payload(data)
    except (SchemaMismatchError, UnknownRoleNameError) as exc:
        logger.debug("rejected chat history JSON: %s", exc)
        raise
    logger.debug("decoded chat history with %d messages", len(history))
    return history


__all__ = [
    "ChatHistoryPayload",
    "MessagePayload",
    "decode_history",
    "encode_history",
    "history_from_payload",
    "history_to_payload",
]
