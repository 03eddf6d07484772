from collections.abc import Mapping, Sequence

from src.page.dtos import Section

DEFAULT_LOOKAHEAD = 100.0


def resolve_active_section(
    sections: Sequence[Section],
    offsets: Mapping[Section, float],
    scroll_y: float,
    lookahead: float = DEFAULT_LOOKAHEAD,
) -> Section:
    """
    Return the last section, in document order, whose top offset is at or above
    `scroll_y + lookahead`. Sections without a measured offset never activate.
    Falls back to the first section when none qualifies.
    """
    position = scroll_y + lookahead
    active = sections[0]
    for section in sections:
        offset = offsets.get(section)
        if offset is not None and position >= offset:
            active = section
    return active


class SectionTracker:
    def __init__(
        self,
        sections: Sequence[Section] = tuple(Section),
        lookahead: float = DEFAULT_LOOKAHEAD,
    ):
        if not sections:
            raise ValueError("At least one section is required")
        self._sections = tuple(sections)
        self._lookahead = lookahead
        self._offsets: dict[Section, float] = {}
        self._active = self._sections[0]
        self._scroll_y = 0.0

    @property
    def sections(self) -> tuple[Section, ...]:
        return self._sections

    @property
    def active(self) -> Section:
        return self._active

    @property
    def offsets(self) -> dict[Section, float]:
        return dict(self._offsets)

    def update_layout(self, offsets: Mapping[Section, float]) -> Section:
        """Replace the measured offsets and re-evaluate at the last scroll position."""
        self._offsets = {section: offsets[section] for section in self._sections if section in offsets}
        return self.on_scroll(self._scroll_y)

    def on_scroll(self, scroll_y: float) -> Section:
        self._scroll_y = scroll_y
        self._active = resolve_active_section(
            self._sections, self._offsets, scroll_y, self._lookahead
        )
        return self._active
