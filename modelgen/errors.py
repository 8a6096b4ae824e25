from __future__ import annotations


class ModelGenError(Exception):
    """Base class for errors raised outside the synthesis core."""

    status_code = 400


class ConfigError(ModelGenError):
    pass


class CatalogError(ModelGenError):
    """The schema catalog could not be read (connection, driver, bad file)."""

    status_code = 502


class TableNotFoundError(CatalogError):
    status_code = 404

    def __init__(self, table_name: str):
        super().__init__(f"{table_name} table does not exist")
        self.table_name = table_name
