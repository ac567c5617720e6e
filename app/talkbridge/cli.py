"""Payload inspector -- run a saved Talk webhook body through the pipeline."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from .config.settings import cfg
from .media import attachment_kind
from .webhook import EnvelopeError, InboundMessage, parse_envelope, payload_to_inbound_message

console = Console()

EXIT_MESSAGE = 0
EXIT_IGNORED = 1
EXIT_INVALID = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="talkbridge-inspect",
        description="Resolve a Nextcloud Talk webhook payload without running the server.",
    )
    parser.add_argument("payload", help="path to a JSON webhook body, or '-' for stdin")
    parser.add_argument("--base-url", default=None, help="Nextcloud base URL (default: NEXTCLOUD_URL)")
    parser.add_argument("--api-user", default=None, help="Nextcloud account (default: NEXTCLOUD_API_USER)")
    return parser


def _read_payload(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as fh:
        return fh.read()


def _print_message(message: InboundMessage) -> None:
    console.print(f"[bold]{message.category}[/bold] {message.message_id} in {message.room_name or message.room_token}")
    console.print(f"[dim]from[/dim] {message.sender_name or message.sender_id}")
    console.print()
    console.print(message.text, markup=False)

    if not message.has_attachments:
        return
    table = Table(title="Attachments")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("MIME type")
    table.add_column("Size", justify="right")
    table.add_column("Download URL", overflow="fold")
    for att in message.attachments:
        table.add_row(
            att.name or "-",
            attachment_kind(att.mimetype, att.name),
            att.mimetype or "-",
            str(att.size) if att.size is not None else "-",
            att.download_url or "[dim]none[/dim]",
        )
    console.print()
    console.print(table)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        payload = parse_envelope(json.loads(_read_payload(args.payload)))
    except OSError as exc:
        console.print(f"[red]Cannot read payload:[/red] {exc}")
        return EXIT_INVALID
    except EnvelopeError as exc:
        console.print(f"[red]{exc}[/red]")
        return EXIT_INVALID
    except (ValueError, RecursionError) as exc:
        console.print(f"[red]Payload is not JSON:[/red] {exc}")
        return EXIT_INVALID

    message = payload_to_inbound_message(
        payload,
        base_url=args.base_url if args.base_url is not None else cfg.nextcloud_url,
        api_user=args.api_user if args.api_user is not None else cfg.nextcloud_api_user,
    )
    if message is None:
        console.print(f"[yellow]Ignored {payload.category} event[/yellow] (type={payload.type})")
        return EXIT_IGNORED

    _print_message(message)
    return EXIT_MESSAGE


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
