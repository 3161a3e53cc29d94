"""Read and send private messages."""

import typer

from gd_client.app_context import use_context


def messages(ctx: typer.Context, page: int = typer.Option(default=0, min=0, help="Inbox page")) -> None:
    """List inbox messages (unread marked with *)."""
    app = use_context(ctx)
    inbox = app.run_authenticated(lambda client: client.get_private_messages(page))
    app.out.print_messages(inbox)


def read(ctx: typer.Context, message_id: int) -> None:
    """Print the body of a private message."""
    app = use_context(ctx)
    body = app.run_authenticated(lambda client: client.get_message_body(message_id))
    app.out.print_message_body(message_id, body)


def send(ctx: typer.Context, account_id: int, subject: str, body: str) -> None:
    """Send a private message to a user by account id."""
    app = use_context(ctx)
    app.run_authenticated(lambda client: client.send_private_message(account_id, subject, body))
    app.out.print_message_sent(account_id)
