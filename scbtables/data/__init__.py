from .catalog import DatasetId, dataset_ids, get_specification, lookup
from .query import DimensionSelection, QuerySpecification
from .response import TableMetadata, TableResponse, TableRow, fetch_table
from .schema import ColumnDescriptor, ColumnIndex, ColumnKind, index_columns
from .source import JSON_HEADERS, RequestsTransport, Transport, sanitize_body

__all__ = [
    "DatasetId",
    "dataset_ids",
    "get_specification",
    "lookup",
    "DimensionSelection",
    "QuerySpecification",
    "TableMetadata",
    "TableResponse",
    "TableRow",
    "fetch_table",
    "ColumnDescriptor",
    "ColumnIndex",
    "ColumnKind",
    "index_columns",
    "JSON_HEADERS",
    "RequestsTransport",
    "Transport",
    "sanitize_body",
]
