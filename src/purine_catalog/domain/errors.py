"""Errors raised by the catalog ingestion pipeline."""


class CatalogIngestionError(Exception):
    """Base class for fatal ingestion failures."""


class NoDataFoundError(CatalogIngestionError):
    """No dated snapshot folder exists under the data directory."""


class MissingSourceFileError(CatalogIngestionError):
    """The food or alcohol CSV is absent from the snapshot folder."""


class HeaderNotFoundError(CatalogIngestionError):
    """A source file lacks the expected description header row."""
