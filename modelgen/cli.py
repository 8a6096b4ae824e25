from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from modelgen.config import configure_logging, load_settings, resolve_database_url
from modelgen.core.catalog import open_catalog
from modelgen.core.generators.model_gen import generate_model
from modelgen.core.output.writer import FileWriter, model_path
from modelgen.errors import ConfigError, ModelGenError, TableNotFoundError

_log = logging.getLogger("modelgen.cli")

EXIT_OK = 0
EXIT_TABLE_MISSING = 1
EXIT_ERROR = 2


def _prompt_overwrite(table_name: str):
    def confirm(path: Path) -> bool:
        try:
            answer = input(f"{table_name} model already exists at {path}, overwrite it? [y/N] ")
        except EOFError:
            _log.info("No answer to overwrite prompt for %s, keeping existing model", path)
            return False
        except KeyboardInterrupt:
            print()
            return False
        return answer.strip().lower() in ("y", "yes")

    return confirm


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="modelgen", description="Generate Goravel model structs from database tables")
    ap.add_argument("--config", default=None, help="Config file (default MODELGEN_CONFIG_FILE or ./modelgen.yaml)")
    sub = ap.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create-model", help="Create model")
    create.add_argument("-t", "--table", default="", help="model table name")
    create.add_argument("-d", "--database", default="", help="database connection name")
    create.add_argument("--catalog", default=None, help="Schema file (.yaml/.json) or database URL; overrides --database")
    create.add_argument("--package", default=None, help="Go package name (default from settings)")
    create.add_argument("--output-dir", default=None, help="Directory for generated models (default from settings)")
    create.add_argument("-f", "--force", action="store_true", help="Overwrite an existing model without asking")
    create.add_argument("--stdout", action="store_true", help="Print the model instead of writing it")

    tables = sub.add_parser("list-tables", help="List tables of a database")
    tables.add_argument("-d", "--database", default="", help="database connection name")
    tables.add_argument("--catalog", default=None, help="Schema file (.yaml/.json) or database URL")
    return ap


def _create_model(args: argparse.Namespace, settings, source: str) -> int:
    table_name = (args.table or "").strip()
    if not table_name:
        print("-t table name parameter cannot be empty")
        return EXIT_OK

    catalog = open_catalog(source)
    try:
        if table_name not in catalog.list_tables():
            print(f"{table_name} table does not exist")
            return EXIT_TABLE_MISSING
        columns = catalog.columns_of(table_name)
    finally:
        catalog.close()

    files = generate_model(table_name, columns, package_name=settings.package_name, source="cli")
    code = next(iter(files.values()))

    if args.stdout:
        sys.stdout.write(code)
        return EXIT_OK

    path = model_path(Path(settings.output_dir), table_name)
    writer = FileWriter(confirm=None if args.force else _prompt_overwrite(table_name))
    if not writer.write_if_confirmed(path, code):
        return EXIT_OK

    print(f"Model {table_name} created successfully")
    return EXIT_OK


def _list_tables(source: str) -> int:
    catalog = open_catalog(source)
    try:
        for name in catalog.list_tables():
            print(name)
    finally:
        catalog.close()
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings(
            Path(args.config) if args.config else None,
            package_name=getattr(args, "package", None),
            output_dir=getattr(args, "output_dir", None),
        )
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    configure_logging(settings)

    try:
        source = args.catalog or resolve_database_url(settings, args.database)
        if args.command == "list-tables":
            return _list_tables(source)
        return _create_model(args, settings, source)
    except TableNotFoundError as exc:
        print(str(exc))
        return EXIT_TABLE_MISSING
    except ModelGenError as exc:
        _log.debug("create-model failed", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as exc:
        print(f"ERROR: cannot write model: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
