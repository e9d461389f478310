"""Typed slide models shared by layout and both render backends."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

Color = tuple[int, int, int]
TextMeasurer = Callable[[str], float]

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def parse_hex(value: str) -> Color:
    match = _HEX_RE.match(value.strip())
    if not match:
        return (0, 0, 0)
    return tuple(int(part, 16) for part in match.groups())  # type: ignore[return-value]


def to_hex(color: Color) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


@dataclass(frozen=True)
class Theme:
    name: str
    background: Color
    text: Color
    accent: Color

    @classmethod
    def from_hex(cls, name: str, background: str, text: str, accent: str) -> "Theme":
        return cls(name=name, background=parse_hex(background), text=parse_hex(text), accent=parse_hex(accent))


@dataclass(frozen=True)
class Profile:
    display_name: str = "Your Name"
    handle: str = "@yourhandle"
    avatar: bytes | None = None

    @classmethod
    def empty(cls) -> "Profile":
        return cls(display_name="", handle="", avatar=None)


@dataclass(frozen=True)
class TextStyle:
    weight: str
    size: int


@dataclass(frozen=True)
class TextRun:
    role: str
    text: str
    x: float
    y: float
    weight: str
    size: int
    color: Color
    opacity: float = 1.0

    @property
    def bold(self) -> bool:
        return self.weight == "bold"


@dataclass(frozen=True)
class AvatarSlot:
    x: float
    y: float
    diameter: float
    image: bytes | None = None
    placeholder: Color = (180, 180, 180)

    @property
    def radius(self) -> float:
        return self.diameter / 2

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.radius, self.y + self.radius)

    @property
    def box(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.x + self.diameter, self.y + self.diameter)


@dataclass(frozen=True)
class SlideLayout:
    index: int
    total: int
    size: int
    background: Color
    avatar: AvatarSlot
    runs: tuple[TextRun, ...]

    def _role(self, role: str) -> list[TextRun]:
        return [run for run in self.runs if run.role == role]

    @property
    def name_run(self) -> TextRun:
        return self._role("name")[0]

    @property
    def handle_run(self) -> TextRun:
        return self._role("handle")[0]

    @property
    def quote_runs(self) -> list[TextRun]:
        return self._role("quote")

    @property
    def counter_run(self) -> TextRun:
        return self._role("counter")[0]
