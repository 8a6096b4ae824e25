"""Generate Goravel ORM model structs from relational table metadata."""

__version__ = "0.1.0"
