"""IRC message model definitions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

Tags = dict[str, str]


@dataclass(frozen=True, slots=True)
class Prefix:
    """Origin of a message: ``name!user@host``. Empty strings mean absent."""

    name: str = ""
    user: str = ""
    host: str = ""

    def __bool__(self) -> bool:
        return bool(self.name or self.user or self.host)

    def __str__(self) -> str:
        from .prefix import render_prefix

        return render_prefix(self)


@dataclass(frozen=True, slots=True, init=False)
class Message:
    """Parsed IRC line: tags, prefix, command and ordered parameters.

    ``params`` is always stored as a tuple and ``tags`` as a read-only copy,
    so messages are immutable and hashable.
    """

    tags: Mapping[str, str]
    prefix: Prefix
    command: str
    params: tuple[str, ...]

    def __init__(
        self,
        command: str = "",
        params: Iterable[str] = (),
        *,
        tags: Mapping[str, str] | None = None,
        prefix: Prefix | None = None,
    ) -> None:
        object.__setattr__(self, "tags", MappingProxyType(dict(tags) if tags else {}))
        object.__setattr__(self, "prefix", prefix if prefix is not None else Prefix())
        object.__setattr__(self, "command", command)
        object.__setattr__(self, "params", tuple(params))

    def __hash__(self) -> int:
        return hash(
            (frozenset(self.tags.items()), self.prefix, self.command, self.params)
        )

    @property
    def trailing(self) -> str | None:
        """Last parameter, or None for a message without parameters."""
        return self.params[-1] if self.params else None

    def __bytes__(self) -> bytes:
        from .serializer import render

        return render(self)

    def __str__(self) -> str:
        from .serializer import render_text

        return render_text(self)
