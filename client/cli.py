"""
Interactive terminal client for the Contacts API.

Usage:
    >>> contacts-client
    >>> contacts-client --api-url http://localhost:3000
"""

import argparse
import logging
import os
from typing import Any, Dict, List

import httpx
from rich import box
from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from .api import ContactsApiError, ContactsClient
from .app import FORM_FIELDS, ContactsApp

console = Console()

COMMANDS = "[bold]s[/]earch  [bold]n[/]ew  [bold]e[/]dit #  [bold]d[/]elete #  [bold]r[/]eload  [bold]q[/]uit"

LABELS = {
    "firstName": "First name",
    "lastName": "Last name",
    "email": "Email",
    "phone": "Phone",
    "company": "Company",
    "notes": "Notes",
    "avatarUrl": "Avatar URL",
}


def render(contacts: List[Dict[str, Any]], q: str) -> None:
    title = f"Contacts matching '{q}'" if q.strip() else "Contacts"
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Email")
    table.add_column("Phone")
    table.add_column("Company")

    for i, c in enumerate(contacts, start=1):
        name = " ".join(p for p in (c.get("firstName"), c.get("lastName")) if p)
        table.add_row(str(i), name, c.get("email") or "", c.get("phone") or "", c.get("company") or "")

    console.print(table)
    if not contacts:
        console.print("[dim]No contacts.[/dim]")


def fill_form(app: ContactsApp) -> None:
    """Prompt for every field; Enter keeps the current value."""
    for name in FORM_FIELDS:
        app.form[name] = Prompt.ask(LABELS[name], default=app.form.get(name, ""), show_default=bool(app.form.get(name)))


def pick(app: ContactsApp, arg: str):
    try:
        return app.contacts[int(arg) - 1]
    except (ValueError, IndexError):
        console.print(f"[red]No contact #{arg}[/red]")
        return None


def run(app: ContactsApp) -> None:
    app.load()

    while True:
        render(app.contacts, app.q)
        console.print(COMMANDS)
        command, _, arg = Prompt.ask(">").strip().partition(" ")
        command = command.lower()

        try:
            if command in ("q", "quit"):
                return
            elif command in ("s", "search"):
                app.search(arg or Prompt.ask("Search", default=""))
            elif command in ("r", "reload"):
                app.load()
            elif command in ("n", "new"):
                app.cancel()
                fill_form(app)
                if not app.submit():
                    console.print("[yellow]First name and email are required.[/yellow]")
            elif command in ("e", "edit"):
                contact = pick(app, arg)
                if contact:
                    app.edit(contact)
                    fill_form(app)
                    if not Confirm.ask("Save changes?", default=True):
                        app.cancel()
                    elif not app.submit():
                        console.print("[yellow]First name and email are required.[/yellow]")
            elif command in ("d", "delete"):
                contact = pick(app, arg)
                if contact:
                    app.delete(contact["id"], confirm=lambda msg: Confirm.ask(msg, default=False))
            else:
                console.print(f"[red]Unknown command: {command}[/red]")
        except ContactsApiError as e:
            console.print(f"[red]Error {e.status_code}: {e.detail}[/red]")
        except httpx.HTTPError as e:
            console.print(f"[red]Request failed: {e}[/red]")


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive Contacts client")
    parser.add_argument(
        "--api-url",
        default=os.getenv("CONTACTS_API_URL", "http://localhost:3000"),
        help="Contacts API root URL",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose HTTP logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
    )

    with ContactsClient(args.api_url) as api:
        try:
            healthy = api.health()
        except httpx.HTTPError as e:
            console.print(f"[red]Cannot reach {args.api_url}: {e}[/red]")
            raise SystemExit(1)
        if not healthy:
            console.print(f"[yellow]Warning: {args.api_url} reports the database as down[/yellow]")
        try:
            run(ContactsApp(api))
        except KeyboardInterrupt:
            console.print()


if __name__ == "__main__":
    main()
