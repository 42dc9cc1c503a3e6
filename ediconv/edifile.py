"""In-memory model of an EDIFACT interchange: segments, elements, components."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

SEGMENT_SEPARATOR = "'"
ELEMENT_SEPARATOR = "+"
COMPONENT_SEPARATOR = ":"


@dataclass(frozen=True)
class Component:
    """A single component value of a data element."""

    value: str


class Element:
    """A data element, optionally made of several components."""

    def __init__(self, raw: str | None = None) -> None:
        self.raw: str = raw if raw is not None else ""
        self.components: list[Component] = (
            [Component(part) for part in raw.split(COMPONENT_SEPARATOR)]
            if raw is not None
            else []
        )

    def __repr__(self) -> str:
        return f"Element({self.raw!r})"

    def has_components(self) -> bool:
        return len(self.components) > 0

    def is_single_component_element(self) -> bool:
        return len(self.components) == 1

    def add_component(self, value: str) -> None:
        self.components.append(Component(value))

    def as_string(self) -> str:
        """Serialise the element from its components."""
        return COMPONENT_SEPARATOR.join(c.value for c in self.components)


class Segment:
    """A segment: its first element is the segment tag."""

    def __init__(self, segment_string: str | None = None) -> None:
        self.elements: list[Element] = (
            [Element(part) for part in segment_string.split(ELEMENT_SEPARATOR)]
            if segment_string is not None
            else []
        )

    def __repr__(self) -> str:
        return f"Segment({self.as_string()!r})"

    @property
    def name(self) -> str | None:
        """The segment tag, or None for a segment without elements."""
        return self.elements[0].raw if self.elements else None

    @name.setter
    def name(self, segment_name: str) -> None:
        if self.elements:
            self.elements[0].raw = segment_name
        else:
            self.elements.append(Element(segment_name))

    def has_elements(self) -> bool:
        return len(self.elements) > 0

    def new_element(self, value: str | None = None) -> Element:
        """Append a new element (empty if ``value`` is None) and return it."""
        element = Element(value)
        self.elements.append(element)
        return element

    def get_element_value(self, element_index: int, component_index: int | None = None) -> str:
        """Return an element's raw value or one of its components; "" when out of range."""
        if not 0 <= element_index < len(self.elements):
            return ""
        element = self.elements[element_index]
        if component_index is None:
            return element.raw
        if 0 <= component_index < len(element.components):
            return element.components[component_index].value
        return ""

    def as_string(self) -> str:
        return ELEMENT_SEPARATOR.join(e.as_string() for e in self.elements)


@dataclass
class EdiFile:
    """A sequence of segments with a read cursor."""

    segments: list[Segment] = field(default_factory=list)
    file_loaded: bool = False
    _cursor: int = 0

    def load_from_file(self, file_name: str | PathLike) -> None:
        """Read segments from a file and append them; raises OSError if it cannot be read."""
        self.file_loaded = False
        with open(file_name, encoding="utf-8") as handle:
            content = handle.read()
        for chunk in content.split(SEGMENT_SEPARATOR):
            text = chunk.strip()
            if text:
                self.segments.append(Segment(text))
        self.file_loaded = True

    def get_segment(self, index: int) -> Segment | None:
        if 0 <= index < len(self.segments):
            return self.segments[index]
        return None

    def current_segment(self) -> Segment | None:
        """The segment under the read cursor, or None past the end."""
        return self.get_segment(self._cursor)

    def goto_next_segment(self) -> None:
        self._cursor += 1

    def new_segment(self, segment_name: str) -> Segment:
        segment = Segment(segment_name)
        self.segments.append(segment)
        return segment

    def as_string(self) -> str:
        return "".join(s.as_string() + SEGMENT_SEPARATOR for s in self.segments)