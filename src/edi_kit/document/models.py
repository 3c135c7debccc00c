# src/edi_kit/document/models.py

from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Union


class Format(str, Enum):
    """Document representation a conversion reads from or writes to."""

    JSON = "json"
    XML = "xml"
    STRING = "string"


# Untyped tree produced by parsers and checked by the validator.
# Decoded JSON may also hold numbers, booleans and None at any level.
RawTree = Union[str, list["RawTree"], dict[str, "RawTree"]]


class Occurrence(Mapping[str, str]):
    """One instance of a segment: element key -> element value.

    Immutable. Built only by the validator.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Mapping[str, str]) -> None:
        self._elements = MappingProxyType(dict(elements))

    def __getitem__(self, key: str) -> str:
        return self._elements[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"Occurrence({dict(self._elements)!r})"

    def to_dict(self) -> dict[str, str]:
        return dict(self._elements)


class Document(Mapping[str, tuple[Occurrence, ...]]):
    """Canonical document: segment name -> ordered occurrences.

    Immutable. Every format converts through this type, and holding one
    means the structural invariants were checked.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Mapping[str, tuple[Occurrence, ...]]) -> None:
        self._segments = MappingProxyType(
            {name: tuple(occurrences) for name, occurrences in segments.items()}
        )

    def __getitem__(self, name: str) -> tuple[Occurrence, ...]:
        return self._segments[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __repr__(self) -> str:
        return f"Document({self.to_dict()!r})"

    def occurrence_count(self) -> int:
        return sum(len(occurrences) for occurrences in self._segments.values())

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        """Plain, JSON-serializable copy of the document."""
        return {
            name: [occurrence.to_dict() for occurrence in occurrences]
            for name, occurrences in self._segments.items()
        }
