from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

import json
import logging

import pandas as pd

from .catalog import DatasetId, get_specification
from .query import QuerySpecification
from .schema import ColumnDescriptor, ColumnIndex, ColumnKind, index_columns
from .source import JSON_HEADERS, RequestsTransport, Transport, parse_json_object
from ..errors import ParseError, RowIndexError
from ..time.ref_period import RefPeriod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableMetadata:
    title: str
    latest_period: Optional[str] = None


@dataclass(frozen=True)
class TableRow:
    key: Tuple[str, ...]
    values: Tuple[str, ...]


def _require(obj: Mapping[str, Any], name: str, what: str) -> Any:
    if name not in obj:
        raise ParseError(f"{what} is missing required field {name!r}")
    return obj[name]


def _latest_time_value(variables: Any) -> Optional[str]:
    if not isinstance(variables, list):
        return None
    for var in variables:
        if isinstance(var, Mapping) and var.get("time") is True:
            values = var.get("values", [])
            if not isinstance(values, list):
                raise ParseError("time variable 'values' must be a list")
            if not values:
                return None
            if not isinstance(values[-1], str):
                raise ParseError("time variable 'values' must hold strings")
            return values[-1]
    return None


def parse_metadata(obj: Mapping[str, Any]) -> TableMetadata:
    """Title and last time-dimension value from a table metadata object."""
    title = _require(obj, "title", "metadata")
    if not isinstance(title, str):
        raise ParseError(f"metadata title must be a string, got {type(title).__name__}")
    latest = _latest_time_value(obj.get("variables"))
    if latest is None:
        logger.info("No time dimension in metadata for %r", title)
    return TableMetadata(title=title, latest_period=latest)


def _string_tuple(items: Any, name: str, row: int) -> Tuple[str, ...]:
    if not isinstance(items, list):
        raise ParseError(f"data row {row}: {name!r} must be a list")
    for j, item in enumerate(items):
        if not isinstance(item, str):
            raise ParseError(f"data row {row}: {name!r} item {j} is not a string")
    return tuple(items)


def parse_rows(data: Any, index: ColumnIndex) -> Tuple[TableRow, ...]:
    if not isinstance(data, list):
        raise ParseError("'data' must be a list of rows")

    n_keys, n_measures = index.key_count, index.measure_count
    rows: List[TableRow] = []
    for i, raw in enumerate(data):
        if not isinstance(raw, Mapping):
            raise ParseError(f"data row {i} is not an object")
        key = _string_tuple(raw.get("key", []), "key", i)
        values = _string_tuple(raw.get("values", []), "values", i)
        if len(key) != n_keys or len(values) != n_measures:
            raise ParseError(
                f"data row {i} has {len(key)} keys and {len(values)} values; "
                f"columns declare {n_keys} and {n_measures}"
            )
        rows.append(TableRow(key=key, values=values))
    return tuple(rows)


@dataclass(frozen=True)
class TableResponse:
    """Column-oriented view of one PxWeb data response.

    Values are returned as the strings the API sent. Measure columns are
    numeric-looking but may hold placeholders such as ".." for missing
    observations, so no coercion happens here (see ``to_frame``).
    """

    dataset_id: str
    title: str
    latest_observed_period: Optional[str]
    index: ColumnIndex
    rows: Tuple[TableRow, ...]

    @classmethod
    def from_payloads(
        cls,
        dataset_id: str,
        metadata: Mapping[str, Any],
        data: Mapping[str, Any],
    ) -> "TableResponse":
        meta = parse_metadata(metadata)
        columns = _require(data, "columns", "data response")
        if not isinstance(columns, list):
            raise ParseError("'columns' must be a list")
        index = index_columns(columns)
        rows = parse_rows(_require(data, "data", "data response"), index)

        logger.debug(
            "%s: %d columns (%d keys, %d measures), %d rows",
            dataset_id,
            len(index),
            index.key_count,
            index.measure_count,
            len(rows),
        )
        return cls(
            dataset_id=dataset_id,
            title=meta.title,
            latest_observed_period=meta.latest_period,
            index=index,
            rows=rows,
        )

    @classmethod
    def fetch(
        cls, spec: QuerySpecification, transport: Optional[Transport] = None
    ) -> "TableResponse":
        """GET the table metadata, POST the query, and build the table.

        Any transport or parse failure propagates; no partial table is built.
        """
        transport = transport if transport is not None else RequestsTransport()

        logger.info("Fetching %s from %s", spec.dataset_id, spec.url)
        metadata = parse_json_object(
            transport.get(spec.url, JSON_HEADERS), what=f"{spec.dataset_id} metadata"
        )
        body = parse_json_object(
            transport.post(spec.url, JSON_HEADERS, json.dumps(spec.payload)),
            what=f"{spec.dataset_id} data",
        )
        return cls.from_payloads(spec.dataset_id, metadata, body)

    @property
    def columns(self) -> Tuple[ColumnDescriptor, ...]:
        return self.index.columns

    def _row(self, row: int) -> TableRow:
        if not 0 <= row < len(self.rows):
            raise RowIndexError(
                f"Row {row} out of range for table with {len(self.rows)} rows"
            )
        return self.rows[row]

    def value(self, row: int, column: str) -> str:
        col = self.index.descriptor(column)
        r = self._row(row)
        if col.kind == ColumnKind.KEY:
            return r.key[col.position]
        return r.values[col.position]

    def column(self, column: str) -> List[str]:
        col = self.index.descriptor(column)
        if col.kind == ColumnKind.KEY:
            return [r.key[col.position] for r in self.rows]
        return [r.values[col.position] for r in self.rows]

    def row_count(self) -> int:
        return len(self.rows)

    def column_count(self) -> int:
        return len(self.index)

    def column_codes(self) -> List[str]:
        return self.index.codes()

    def column_kinds(self) -> List[ColumnKind]:
        return self.index.kinds()

    def latest_ref_period(self) -> Optional[RefPeriod]:
        if self.latest_observed_period is None:
            return None
        return RefPeriod.parse(self.latest_observed_period)

    def to_frame(self, numeric: bool = False) -> pd.DataFrame:
        """One column per code, in declaration order.

        With ``numeric=True`` measure columns are coerced with
        ``pd.to_numeric(errors="coerce")``; placeholders become NaN.
        """
        codes = self.column_codes()
        df = pd.DataFrame(
            {code: pd.Series(self.column(code), dtype=object) for code in codes},
            columns=codes,
        )
        if numeric:
            for col in self.columns:
                if col.kind == ColumnKind.MEASURE:
                    df[col.code] = pd.to_numeric(df[col.code], errors="coerce")
        return df


def fetch_table(
    dataset_id: DatasetId | str, transport: Optional[Transport] = None
) -> TableResponse:
    return TableResponse.fetch(get_specification(dataset_id), transport=transport)
