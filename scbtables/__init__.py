"""scbtables: price-index tables from the Statistics Sweden (SCB) PxWeb API."""

from .data.catalog import DatasetId, dataset_ids, get_specification, lookup
from .data.query import DimensionSelection, QuerySpecification
from .data.response import TableResponse, fetch_table
from .data.schema import ColumnDescriptor, ColumnKind
from .data.source import RequestsTransport, Transport, sanitize_body
from .time.ref_period import RefFreq, RefPeriod
from .errors import (
    ParseError,
    RowIndexError,
    ScbError,
    TransportError,
    UnknownColumnError,
    UnknownDatasetError,
)

__all__ = [
    "DatasetId",
    "dataset_ids",
    "get_specification",
    "lookup",
    "DimensionSelection",
    "QuerySpecification",
    "TableResponse",
    "fetch_table",
    "ColumnDescriptor",
    "ColumnKind",
    "RequestsTransport",
    "Transport",
    "sanitize_body",
    "RefFreq",
    "RefPeriod",
    "ParseError",
    "RowIndexError",
    "ScbError",
    "TransportError",
    "UnknownColumnError",
    "UnknownDatasetError",
]
