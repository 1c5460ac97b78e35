"""CLI tools for the DECE record store."""

from pathlib import Path

import click
from pydantic import ValidationError

from dece.core.config import settings
from dece.core.errors import StoreError
from dece.core.structured_logging import configure_logging
from dece.db.enums import UserRole
from dece.db.registry import SCHEMA_VERSION, TABLES
from dece.db.session import open_store
from dece.schemas.users import UserCreate
from dece.services import backup_service, record_service, user_service

RESET_CONFIRMATION = "ELIMINAR"


def _fail(message: str) -> None:
    click.echo(f"❌ {message}", err=True)
    raise SystemExit(1)


@click.group()
@click.option(
    "--db",
    "db_path",
    default=None,
    help="Store file (default: DATABASE_PATH setting)",
)
@click.pass_context
def cli(ctx: click.Context, db_path: str | None):
    """DECE record store tools."""
    configure_logging()
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = db_path or settings.DATABASE_PATH


@cli.command()
@click.option("--no-seed", is_flag=True, help="Create an empty store (no demo data)")
@click.pass_context
def init(ctx: click.Context, no_seed: bool):
    """
    Open the store, creating and seeding it if it does not exist yet.

    Example:
        dece --db gestion_dece.db init
    """
    try:
        store, was_created = open_store(ctx.obj["db_path"], seed=False if no_seed else None)
    except StoreError as e:
        _fail(f"Error: {e}")
    store.close()
    if was_created:
        click.echo(f"✓ Created store {store.path} (schema version {SCHEMA_VERSION})")
    else:
        click.echo(f"✓ Store {store.path} is at schema version {SCHEMA_VERSION}")


@cli.command()
@click.pass_context
def info(ctx: click.Context):
    """Show the schema version and row count of every table."""
    try:
        store, _ = open_store(ctx.obj["db_path"])
    except StoreError as e:
        _fail(f"Error: {e}")
    try:
        click.echo(f"Store: {store.path}")
        click.echo(f"Schema version: {store.schema_version()}")
        with store.transaction() as db:
            for name, model in TABLES.items():
                click.echo(f"  {name}: {record_service.count(db, model)}")
    finally:
        store.close()


@cli.command("export-backup")
@click.option("--output", "output", default=None, help="File to write (default: BACKUP_DIR)")
@click.pass_context
def export_backup(ctx: click.Context, output: str | None):
    """Write every table to a JSON backup file."""
    try:
        store, _ = open_store(ctx.obj["db_path"])
    except StoreError as e:
        _fail(f"Error: {e}")
    try:
        with store.transaction() as db:
            if output:
                path = Path(output)
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(backup_service.dump_backup(db), encoding="utf-8")
            else:
                path = backup_service.write_backup_file(db)
    finally:
        store.close()
    click.echo(f"✓ Backup written to {path}")


@cli.command("restore-backup")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def restore_backup(ctx: click.Context, path: str):
    """
    Replace all data with the contents of a backup file.

    The file is fully validated first; nothing changes if it is malformed.
    """
    try:
        document = backup_service.load_backup_file(path)
        store, _ = open_store(ctx.obj["db_path"])
    except StoreError as e:
        _fail(f"Error: {e}")
    try:
        report = backup_service.restore_backup(store, document)
    except StoreError as e:
        _fail(f"Error: {e}")
    finally:
        store.close()
    click.echo(f"✓ Restored {report.total} rows from {path}")
    for name, rows in report.counts.items():
        if rows:
            click.echo(f"  {name}: {rows}")


@cli.command()
@click.option(
    "--confirm",
    "confirmation",
    required=True,
    help=f"Type {RESET_CONFIRMATION} to delete the store file",
)
@click.pass_context
def reset(ctx: click.Context, confirmation: str):
    """Delete the store file; the next open recreates and reseeds it."""
    if confirmation != RESET_CONFIRMATION:
        _fail(f"Confirmation text must be {RESET_CONFIRMATION}")
    path = Path(ctx.obj["db_path"])
    if not path.exists():
        click.echo(f"Nothing to delete at {path}")
        return
    path.unlink()
    for suffix in ("-journal", "-wal", "-shm"):
        sidecar = path.with_name(path.name + suffix)
        if sidecar.exists():
            sidecar.unlink()
    click.echo(f"✓ Deleted {path}")


@cli.command("create-user")
@click.option("--full-name", required=True, help="Full name")
@click.option("--cedula", required=True, help="National ID (used as login)")
@click.option("--email", required=True, help="Email address")
@click.option(
    "--role",
    type=click.Choice([role.value for role in UserRole]),
    default=UserRole.PROFESSIONAL.value,
    show_default=True,
)
@click.password_option(help="Initial password")
@click.pass_context
def create_user(
    ctx: click.Context, full_name: str, cedula: str, email: str, role: str, password: str
):
    """Register a user; they complete their profile on first login."""
    try:
        data = UserCreate(
            full_name=full_name,
            cedula=cedula,
            email=email,
            password=password,
            role=UserRole(role),
        )
    except ValidationError as e:
        _fail(f"Invalid user: {e.errors()[0]['msg']}")
    try:
        store, _ = open_store(ctx.obj["db_path"])
    except StoreError as e:
        _fail(f"Error: {e}")
    try:
        with store.transaction() as db:
            user = user_service.register_user(db, data)
            user_id = user.id
    except StoreError as e:
        _fail(f"Error: {e}")
    finally:
        store.close()
    click.echo(f"✓ Created user {full_name} (id {user_id}) with status Pendiente")


if __name__ == "__main__":
    cli()
