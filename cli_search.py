"""Terminal client that drives the in-process search controller."""
from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Iterable, List

from usersearch.logging_setup import configure_logging
from usersearch.models import HighlightSpan, ResultsView
from usersearch.session import SearchSession

BOLD = "\033[1m"
GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"

COMMANDS = {":down": "ArrowDown", ":up": "ArrowUp", ":enter": "Enter"}


def render_spans(spans: List[HighlightSpan]) -> str:
    return "".join(f"{GREEN}{span.text}{RESET}" if span.is_match else span.text for span in spans)


def pretty_print_view(view: ResultsView) -> None:
    if not view.visible:
        return
    print(f"Query: {view.query} | results: {len(view.rows)}")
    if view.empty:
        print(f"  {RED}{view.empty_message}{RESET}")
        return
    for row in view.rows:
        marker = f"{BOLD}>{RESET}" if row.highlighted else " "
        print(f"{marker} {render_spans(row.id_spans)} | {render_spans(row.name_spans)}")
        if row.items_notice:
            print(f"      {row.items_notice}")
        print(f"      {render_spans(row.address_spans)}")


async def run_query(session: SearchSession, query: str) -> None:
    session.controller.type_query(query)
    session.controller.flush()
    pretty_print_view(session.view())


async def interactive_shell(session: SearchSession) -> None:
    print("Interactive user search. Type a query, :down/:up/:enter to navigate, :quit to exit.")
    controller = session.controller
    while True:
        try:
            line = await asyncio.to_thread(input, "> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return
        command = line.strip().lower()
        if command in {":quit", ":exit"}:
            return
        if command in COMMANDS:
            controller.key_down(COMMANDS[command])
            if command == ":enter" and session.selected_user is not None:
                print(f"Selected: {session.selected_user.id} {session.selected_user.name}")
            pretty_print_view(session.view())
            continue
        await run_query(session, line)


async def batch_mode(session: SearchSession, file_path: Path) -> None:
    with file_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            query = line.strip()
            if not query:
                continue
            await run_query(session, query)


async def run(args: argparse.Namespace) -> int:
    session = SearchSession()
    try:
        await session.load(args.source)
        if args.batch:
            await batch_mode(session, args.batch)
        elif args.query:
            await run_query(session, args.query)
        else:
            await interactive_shell(session)
    finally:
        session.close()
    return 0


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CLI client for the user directory search")
    parser.add_argument("query", nargs="?", help="Query string. If omitted, starts REPL mode.")
    parser.add_argument("--batch", type=Path, help="File with queries to execute line by line")
    parser.add_argument("--source", help="URL or path of the users JSON (defaults to USERS_URL)")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(args.log_level)
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())
