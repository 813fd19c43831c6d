"""Errors raised while decoding a chat history."""

from __future__ import annotations

from typing import Tuple, Union

Location = Tuple[Union[str, int], ...]


class ChatHistoryError(ValueError):
    """Base class for chat history decode failures."""

    def __init__(self, message: str, *, location: Location = ()) -> None:
        super().__init__(message)
        self.location = tuple(location)

    def __str__(self) -> str:
        message = super().__str__()
        if not self.location:
            return message
        path = ".".join(str(part) for part in self.location)
        return f"{path}: {message}"


class MalformedJsonError(ChatHistoryError):
    """The input is not syntactically valid JSON."""


class SchemaMismatchError(ChatHistoryError):
    """The input is JSON but not shaped like a chat history."""


class UnknownRoleNameError(ChatHistoryError):
    """An ``author_role`` does not name any :class:`AuthorRole` member."""

    def __init__(self, role_name: str, *, location: Location = ()) -> None:
        super().__init__(f"unknown author role {role_name!r}", location=location)
        self.role_name = role_name


__all__ = [
    "ChatHistoryError",
    "MalformedJsonError",
    "SchemaMismatchError",
    "UnknownRoleNameError",
]
