class ScbError(Exception):
    """Base class for errors raised by scbtables."""


class TransportError(ScbError):
    """A GET/POST to the table endpoint failed or returned no body."""


class ParseError(ScbError, ValueError):
    """A response body could not be turned into a table."""


class UnknownDatasetError(ScbError, KeyError):
    pass


class UnknownColumnError(ScbError, KeyError):
    pass


class RowIndexError(ScbError, IndexError):
    pass
