"""Framework-free reply objects: embeds, buttons and their text rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x00AEFF
YELLOW = 0xFFFF00
CYAN = 0x00FFFF
GOLD = 0xFFD700


@dataclass
class Field:
    """One named field of an embed."""

    name: str
    value: str
    inline: bool = False


@dataclass
class Button:
    """A clickable button attached to a reply."""

    custom_id: str
    label: str
    style: str = "primary"
    disabled: bool = False

    def _render(self) -> str:
        return f"({self.label})" if self.disabled else f"[{self.label}]"


@dataclass
class Embed:
    """A rich message card."""

    title: Optional[str] = None
    description: Optional[str] = None
    color: Optional[int] = None
    fields: List[Field] = field(default_factory=list)
    image: Optional[str] = None
    thumbnail: Optional[str] = None
    footer: Optional[str] = None
    timestamp: Optional[datetime] = None

    def add_field(self, name: str, value: str, inline: bool = False) -> "Embed":
        """Append a field and return the embed for chaining."""
        self.fields.append(Field(name, value, inline))
        return self

    def _lines(self) -> List[str]:
        lines: List[str] = []
        if self.title:
            lines.append(self.title)
        if self.thumbnail:
            lines.append(f"(miniatura: {self.thumbnail})")
        if self.description:
            lines.append(self.description)
        lines.extend(f"{f.name}: {f.value}" for f in self.fields)
        if self.image:
            lines.append(f"(obraz: {self.image})")
        if self.footer:
            lines.append(self.footer)
        if self.timestamp is not None:
            lines.append(self.timestamp.isoformat())
        return lines


@dataclass
class Reply:
    """A message sent in answer to a command."""

    content: Optional[str] = None
    embed: Optional[Embed] = None
    buttons: List[Button] = field(default_factory=list)
    ephemeral: bool = False
    attachment: Optional[bytes] = None
    attachment_name: Optional[str] = None

    def render(self) -> str:
        """Render the reply as plain text."""
        lines: List[str] = []
        if self.content:
            lines.append(self.content)
        if self.embed is not None:
            lines.extend(self.embed._lines())
        if self.attachment_name:
            lines.append(f"(załącznik: {self.attachment_name})")
        if self.buttons:
            lines.append(" ".join(button._render() for button in self.buttons))
        return "\n".join(lines)


def argument_count_error() -> Reply:
    """Reply used when a command gets too few arguments."""
    return Reply(
        embed=Embed(
            title="🤨 Coś za mało tych argumentów",
            description=(
                "Weź. Nie baw się ze mną. Dawaj te argumenty. "
                "Albo wezwę istotę wyższą."
            ),
        )
    )


def argument_parse_error() -> Reply:
    """Reply used when a command argument cannot be parsed."""
    return Reply(
        embed=Embed(
            title="🤦🏻 Nie umiem czytać",
            description=(
                "Coś ty za argument dał? Czy ty naprawdę nie wiesz jak działa ta "
                "komenda? Potrzebujesz specjalnego traktowania?"
            ),
        )
    )