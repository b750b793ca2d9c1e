#!/usr/bin/env python3
"""Follow the board live in a terminal.

Prints the rendered tree after every change. Pass a token (from seed.py)
to see reply and delete controls for that user.

Usage:
    python scripts/watch_board.py [TOKEN] [--expand-all]
"""

import argparse
import asyncio
import sys

import logfire

from board.client import BoardClient, LiveBoard, RenderedComment, render_text
from board.config import Settings
from board.util.observability import configure_logfire, instrument_httpx


def print_board(cards: list[RenderedComment]) -> None:
    print("\033[2J\033[H", end="")
    print(render_text(cards))
    sys.stdout.flush()


async def watch(settings: Settings, token: str | None, expand_all: bool) -> None:
    async with BoardClient(settings.client.api_url, token=token) as client:
        viewer = await client.current_user() if token else None
        if token and viewer is None:
            logfire.warn("Token rejected, watching anonymously")

        board = LiveBoard.from_settings(
            client,
            settings.client,
            viewer_id=viewer.user_id if viewer else None,
        )

        if expand_all:

            def expand_and_print(cards: list[RenderedComment]) -> None:
                while True:
                    collapsed = [c for c in cards if c.reply_count and not c.expanded]
                    if not collapsed:
                        break
                    for card in collapsed:
                        board.state.show_all(card.comment_id, card.reply_count)
                    cards = board.render()
                print_board(cards)

            board.on_change = expand_and_print
        else:
            board.on_change = print_board

        await board.run()


def main() -> int:
    parser = argparse.ArgumentParser(description="Follow the comment board live")
    parser.add_argument("token", nargs="?", help="auth token of the viewing user")
    parser.add_argument(
        "--expand-all", action="store_true", help="reveal every reply on refresh"
    )
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings, service_name="board-watcher")
    instrument_httpx()

    try:
        asyncio.run(watch(settings, args.token, args.expand_all))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
