"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.text import Text

from ..exchange import ExchangeController, NotifyLevel
from ..transcript import Message, MessageKind
from .providers import get_endpoint_url, get_responder

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="relaychat",
    help="Chat with a webhook responder from the terminal",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


class ConsoleNotifier:
    """Prints notifications as console lines."""

    _STYLES = {
        NotifyLevel.INFO: "yellow",
        NotifyLevel.SUCCESS: "green",
        NotifyLevel.ERROR: "red",
    }

    def __init__(self, out: Console) -> None:
        self._console = out

    def notify(
        self, level: NotifyLevel, message: str, description: str | None = None
    ) -> None:
        line = Text(message, style=self._STYLES.get(level, ""))
        if description:
            line.append(f": {description}", style="dim")
        self._console.print(line)


def _print_debug(level: str, component: str, message: str) -> None:
    console.print(Text(f"{level.upper():<7} [{component}] {message}", style="dim"))


@app.command()
def chat(
    endpoint: str | None = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="Webhook URL (default: $RELAYCHAT_WEBHOOK_URL or the built-in URL)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive TUI chat interface."""
    async def _tui():
        from ..ui import run_textual_tui

        url = get_endpoint_url(endpoint)
        await run_textual_tui(
            responder=get_responder(url),
            log_level=log_level,
            endpoint=url,
        )
        console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def send(
    prompt: str = typer.Argument(..., help="Prompt to send"),
    endpoint: str | None = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="Webhook URL (default: $RELAYCHAT_WEBHOOK_URL or the built-in URL)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print request tracing"
    ),
):
    """Send a single prompt and print the reply."""
    async def _send() -> Message | None:
        responder = get_responder(endpoint)
        controller = ExchangeController(responder, notifier=ConsoleNotifier(console))
        if verbose:
            controller.set_debug_callback(_print_debug)
        try:
            return await controller.submit(prompt)
        finally:
            await responder.close()

    try:
        reply = asyncio.run(_send())
    except KeyboardInterrupt:
        console.print("\n[dim]Aborted.[/dim]")
        raise typer.Exit(code=130)

    if reply is None:
        console.print("[red]Error: prompt is empty[/red]")
        raise typer.Exit(code=1)

    console.print("[bold green]Assistant:[/bold green]")
    console.print(Text(reply.content))
    if reply.kind == MessageKind.ERROR:
        raise typer.Exit(code=1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
