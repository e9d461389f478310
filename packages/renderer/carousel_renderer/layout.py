"""Backend-neutral slide geometry for 1080x1080 carousel slides."""

from __future__ import annotations

from typing import Callable, Sequence

from .models import AvatarSlot, Profile, SlideLayout, TextRun, TextStyle, Theme

SLIDE_SIZE = 1080
# Clears the left/right arrows social platforms overlay on carousel edges.
MARGIN = 150
MAX_TEXT_WIDTH = SLIDE_SIZE - MARGIN * 2

AVATAR_X = MARGIN
AVATAR_Y = 420
AVATAR_SIZE = 70
PLACEHOLDER_GRAY = (180, 180, 180)

TEXT_GAP = 20
NAME_OFFSET = 30
HANDLE_OFFSET = 55

QUOTE_START_Y = 550
LINE_HEIGHT = 62

COUNTER_X = SLIDE_SIZE - 100
COUNTER_Y = SLIDE_SIZE - 40
COUNTER_OPACITY = 0.5

NAME_STYLE = TextStyle(weight="bold", size=24)
HANDLE_STYLE = TextStyle(weight="normal", size=20)
QUOTE_STYLE = TextStyle(weight="bold", size=48)
COUNTER_STYLE = TextStyle(weight="normal", size=18)

Wrapper = Callable[[str, float], list[str]]


def build_layout(
    quote: str,
    index: int,
    total: int,
    profile: Profile,
    theme: Theme,
    wrap: Wrapper,
) -> SlideLayout:
    if total < 1 or not 0 <= index < total:
        raise ValueError(f"slide index {index} out of range for deck of {total}")

    text_x = AVATAR_X + AVATAR_SIZE + TEXT_GAP
    runs = [
        TextRun(
            role="name",
            text=profile.display_name,
            x=text_x,
            y=AVATAR_Y + NAME_OFFSET,
            weight=NAME_STYLE.weight,
            size=NAME_STYLE.size,
            color=theme.text,
        ),
        TextRun(
            role="handle",
            text=profile.handle,
            x=text_x,
            y=AVATAR_Y + HANDLE_OFFSET,
            weight=HANDLE_STYLE.weight,
            size=HANDLE_STYLE.size,
            color=theme.accent,
        ),
    ]

    for line_index, line in enumerate(wrap(quote, MAX_TEXT_WIDTH)):
        runs.append(
            TextRun(
                role="quote",
                text=line,
                x=MARGIN,
                y=QUOTE_START_Y + line_index * LINE_HEIGHT,
                weight=QUOTE_STYLE.weight,
                size=QUOTE_STYLE.size,
                color=theme.text,
            )
        )

    runs.append(
        TextRun(
            role="counter",
            text=f"{index + 1} / {total}",
            x=COUNTER_X,
            y=COUNTER_Y,
            weight=COUNTER_STYLE.weight,
            size=COUNTER_STYLE.size,
            color=theme.text,
            opacity=COUNTER_OPACITY,
        )
    )

    return SlideLayout(
        index=index,
        total=total,
        size=SLIDE_SIZE,
        background=theme.background,
        avatar=AvatarSlot(
            x=AVATAR_X,
            y=AVATAR_Y,
            diameter=AVATAR_SIZE,
            image=profile.avatar,
            placeholder=PLACEHOLDER_GRAY,
        ),
        runs=tuple(runs),
    )


def build_deck_layouts(deck: Sequence[str], profile: Profile, theme: Theme, wrap: Wrapper) -> list[SlideLayout]:
    total = len(deck)
    return [build_layout(quote, i, total, profile, theme, wrap) for i, quote in enumerate(deck)]
