from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..errors import ParseError, UnknownColumnError

MEASURE_TYPE_TAG = "c"


class ColumnKind(str, Enum):
    KEY = "key"
    MEASURE = "measure"

    @staticmethod
    def from_type_tag(tag: Optional[str]) -> "ColumnKind":
        return ColumnKind.MEASURE if tag == MEASURE_TYPE_TAG else ColumnKind.KEY


@dataclass(frozen=True)
class ColumnDescriptor:
    code: str
    kind: ColumnKind
    # index into the row's "key" array for KEY columns, "values" for MEASURE
    position: int
    text: Optional[str] = None
    type_tag: Optional[str] = None


@dataclass(frozen=True)
class ColumnIndex:
    """Columns in API declaration order, with code lookups."""

    columns: Tuple[ColumnDescriptor, ...]
    _by_code: Mapping[str, ColumnDescriptor] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "_by_code", {c.code: c for c in self.columns})

    def descriptor(self, code: str) -> ColumnDescriptor:
        try:
            return self._by_code[code]
        except KeyError:
            raise UnknownColumnError(
                f"Unknown column: {code!r}. Available: {self.codes()}"
            ) from None

    def kind_of(self, code: str) -> ColumnKind:
        return self.descriptor(code).kind

    def position_of(self, code: str) -> int:
        return self.descriptor(code).position

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self.columns)

    def codes(self) -> List[str]:
        return [c.code for c in self.columns]

    def kinds(self) -> List[ColumnKind]:
        return [c.kind for c in self.columns]

    @property
    def key_count(self) -> int:
        return sum(1 for c in self.columns if c.kind == ColumnKind.KEY)

    @property
    def measure_count(self) -> int:
        return sum(1 for c in self.columns if c.kind == ColumnKind.MEASURE)


def index_columns(columns: Iterable[Mapping[str, Any]]) -> ColumnIndex:
    """One pass over the API "columns" list, numbering keys and measures separately."""
    counters: Dict[ColumnKind, int] = {ColumnKind.KEY: 0, ColumnKind.MEASURE: 0}
    out: List[ColumnDescriptor] = []
    seen = set()

    for i, col in enumerate(columns):
        if not isinstance(col, Mapping):
            raise ParseError(f"Column {i} is not an object: {col!r}")
        code = col.get("code")
        if not isinstance(code, str):
            raise ParseError(f"Column {i} has no string 'code': {col!r}")
        if code in seen:
            raise ParseError(f"Duplicate column code: {code!r}")
        seen.add(code)

        tag = col.get("type")
        kind = ColumnKind.from_type_tag(tag)
        out.append(
            ColumnDescriptor(
                code=code,
                kind=kind,
                position=counters[kind],
                text=col.get("text"),
                type_tag=tag,
            )
        )
        counters[kind] += 1

    return ColumnIndex(tuple(out))
