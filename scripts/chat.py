#!/usr/bin/env python3
"""
Interactive console chat about the résumé.

Commands inside the chat:
    /1 /2 /3   Ask an example question
    /examples  Show the example questions again
    /clear     Clear the conversation
    /quit      Leave

Examples:\n

    $ python scripts/chat.py

    $ python scripts/chat.py --offline
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from resume_chat.app import start_session
from resume_chat.config import load_settings
from resume_chat.contexts.conversation import ChatSession, ConsoleRenderer
from resume_chat.utils.logger import setup_logger

app = typer.Typer(add_completion=False, help="Chat about the résumé in the terminal.")


async def _chat_loop(session: ChatSession) -> None:
    session.open()
    while session.state.is_open:
        try:
            line = await asyncio.to_thread(input, "> ")
        except (EOFError, KeyboardInterrupt):
            break

        command = line.strip().lower()
        if command in ("/quit", "/exit"):
            session.close()
        elif command == "/clear":
            session.clear()
        elif command == "/examples":
            session.renderer.show_examples(session.examples)
        elif command[1:].isdigit() and command.startswith("/"):
            index = int(command[1:]) - 1
            if 0 <= index < len(session.examples):
                await session.ask_example(index)
            else:
                typer.echo(f"No example {index + 1}", err=True)
        else:
            await session.send(line)


async def _run(settings) -> None:
    session = await start_session(settings, renderer=ConsoleRenderer())
    await _chat_loop(session)


@app.command()
def main(
    offline: bool = typer.Option(False, "--offline", help="Answer with the local responder only"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings YAML to merge"),
):
    """Start an interactive chat session."""
    overrides = {"transport.mode": "none"} if offline else {}
    settings = load_settings(config, overrides)
    setup_logger(
        "chat",
        settings.logging.log_dir,
        extra_provenance={"Transport": settings.transport.mode},
        level=settings.logging.level,
    )

    asyncio.run(_run(settings))
    typer.echo("Bye!")


if __name__ == "__main__":
    app()
