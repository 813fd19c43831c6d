"""Chat transcript data structures."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, List

from .errors import UnknownRoleNameError


class AuthorRole(enum.IntEnum):
    """Role of the message author, e.g. user/assistant/system.

    Member names are the wire encoding, so they must not be renamed. The
    numeric values are free to change.
    """

    Unknown = -1
    System = 0
    User = 1
    Assistant = 2

    @classmethod
    def from_name(cls, name: str) -> "AuthorRole":
        """Parse an exact, case-sensitive member name."""

        try:
            return cls.__members__[name]
        except (KeyError, TypeError):
            raise UnknownRoleNameError(name) from None


@dataclass
class Message:
    """A single role-tagged message in a conversation."""

    author_role: AuthorRole
    content: str

    def __post_init__(self) -> None:
        if not isinstance(self.author_role, AuthorRole):
            raise TypeError(f"author_role must be an AuthorRole, got {self.author_role!r}")
        if not isinstance(self.content, str):
            raise TypeError(f"content must be a str, got {type(self.content).__name__}")

    def copy(self) -> "Message":
        return Message(self.author_role, self.content)


@dataclass
class ChatHistory:
    """Ordered chat transcript.

    The constructor copies the supplied messages, so later changes to the
    caller's list or message objects do not leak into the history. Messages
    are only ever appended; nothing here removes or reorders them.
    """

    messages: List[Message] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.messages is None:
            raise TypeError("messages must be an iterable of Message, not None")
        copied = []
        for message in self.messages:
            if not isinstance(message, Message):
                raise TypeError(f"expected Message, got {type(message).__name__}")
            copied.append(message.copy())
        self.messages = copied

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def add_message(self, author_role: AuthorRole, content: str) -> None:
        """Append a message to the end of the history."""

        self.messages.append(Message(author_role, content))

    def to_json(self) -> str:
        """Serialize the history to indented JSON."""

        from .codec import encode_history

        return encode_history(self)

    @classmethod
    def from_json(cls, text: str | bytes) -> "ChatHistory":
        """Deserialize a history produced by :meth:`to_json`.

        Raises
        ------
        MalformedJsonError
            ``text`` is not valid JSON.
        SchemaMismatchError
            The JSON does not have the chat history shape.
        UnknownRoleNameError
            An ``author_role`` is not an :class:`AuthorRole` name.
        """

        from .codec import decode_history

        return decode_history(text)
