"""DIA CLI - Main commands."""
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from diapy.core.api import APIClient, APIConfig, Credentials
from diapy.core.exceptions import DIAException

app = typer.Typer(
    name="dia",
    help="Democracy in Action CRM CLI",
    add_completion=False
)
console = Console()


def make_client(username: str, password: str, domain: Optional[str]) -> APIClient:
    """Create the client used by every command."""
    config = APIConfig.for_domain(domain) if domain else APIConfig.default()
    return APIClient(Credentials(username, password), config)


def parse_pairs(values: List[str], option: str) -> Dict[str, List[str]]:
    """Parse ``name=value`` arguments, collecting repeated names."""
    pairs: Dict[str, List[str]] = {}
    for value in values:
        name, sep, item = value.partition('=')
        if not sep or not name:
            raise typer.BadParameter(f"expected name=value, got {value!r}", param_hint=option)
        pairs.setdefault(name, []).append(item)
    return pairs


UsernameOption = typer.Option(..., "--username", "-u", envvar="DIA_USERNAME", help="DIA username")
PasswordOption = typer.Option(..., "--password", "-p", envvar="DIA_PASSWORD", help="DIA password")
DomainOption = typer.Option(None, "--domain", "-d", envvar="DIA_DOMAIN", help="DIA node, e.g. salsa.democracyinaction.org")


@app.command()
def get(
    table: str = typer.Argument(..., help="Table name, e.g. supporter"),
    key: List[str] = typer.Option([], "--key", "-k", help="Object key (repeatable)"),
    where: Optional[str] = typer.Option(None, "--where", "-w", help="Condition"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum number of objects"),
    username: str = UsernameOption,
    password: str = PasswordOption,
    domain: Optional[str] = DomainOption,
):
    """Fetch objects from a table."""
    options = {}
    if key:
        options['key'] = key
    if where:
        options['where'] = where
    if limit is not None:
        options['limit'] = limit

    try:
        with make_client(username, password, domain) as client:
            items = client.get(table, options)
    except DIAException as e:
        console.print(f"[red]Get failed: {e}[/red]")
        raise typer.Exit(1)

    if not items:
        console.print("[yellow]No objects found[/yellow]")
        return

    columns = list(dict.fromkeys(name for item in items for name in item))
    result = Table(title=f"{table} ({len(items)})")
    for column in columns:
        result.add_column(column)
    for item in items:
        result.add_row(*(item.get(column, '') for column in columns))
    console.print(result)


@app.command()
def process(
    table: str = typer.Argument(..., help="Table name, e.g. supporter"),
    field: List[str] = typer.Option([], "--field", "-f", help="Field as name=value (repeatable)"),
    link: List[str] = typer.Option([], "--link", help="Linked object as table=key (repeatable)"),
    username: str = UsernameOption,
    password: str = PasswordOption,
    domain: Optional[str] = DomainOption,
):
    """Create or update an object."""
    options = {name: values[-1] for name, values in parse_pairs(field, "--field").items()}
    if link:
        options['link'] = parse_pairs(link, "--link")

    try:
        with make_client(username, password, domain) as client:
            saved = client.process(table, options)
    except DIAException as e:
        console.print(f"[red]Process failed: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Saved {table} {saved or ''}[/green]")


@app.command()
def delete(
    table: str = typer.Argument(..., help="Table name, e.g. supporter"),
    key: List[str] = typer.Option(..., "--key", "-k", help="Object key (repeatable)"),
    username: str = UsernameOption,
    password: str = PasswordOption,
    domain: Optional[str] = DomainOption,
):
    """Delete objects by key."""
    try:
        with make_client(username, password, domain) as client:
            client.delete(table, {'key': key})
    except DIAException as e:
        console.print(f"[red]Delete failed: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Deleted {len(key)} {table} object(s)[/green]")


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
