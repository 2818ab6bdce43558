#!/usr/bin/env python3
"""
Ask one question about the résumé and print the answer.

Examples:\n

    $ python scripts/ask.py "What projects have you worked on?"

    $ python scripts/ask.py "Tell me about your experience with React" --offline

    $ python scripts/ask.py "What is your name?" --show-context --show-prompt
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from resume_chat.app import build_prompt_builder, build_session
from resume_chat.config import load_settings
from resume_chat.utils.logger import setup_logger

app = typer.Typer(add_completion=False, help="Ask one question about the résumé.")


async def _ask(
    session, question: str, builder, show_context: bool, show_prompt: bool
) -> Optional[str]:
    """Load the résumé, optionally show context/prompt, then run one turn."""
    await session.retriever.store.load()

    if show_context or show_prompt:
        context = session.retriever.retrieve(question)
        if show_context:
            typer.secho("=== Context ===", bold=True)
            typer.echo(context)
        if show_prompt:
            typer.secho("=== Prompt ===", bold=True)
            typer.echo(builder.build(question, context))
            typer.echo("")

    reply = await session.send(question)
    return reply.content if reply else None


@app.command()
def main(
    question: str = typer.Argument(..., help="Question to ask"),
    show_context: bool = typer.Option(
        False, "--show-context", help="Print the retrieved context block"
    ),
    show_prompt: bool = typer.Option(False, "--show-prompt", help="Print the assembled prompt"),
    offline: bool = typer.Option(False, "--offline", help="Answer with the local responder only"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings YAML to merge"),
):
    """Answer QUESTION from the résumé."""
    overrides = {"transport.mode": "none"} if offline else {}
    settings = load_settings(config, overrides)
    setup_logger("ask", settings.logging.log_dir, level=settings.logging.level)

    session = build_session(settings)
    builder = build_prompt_builder(settings)

    answer = asyncio.run(_ask(session, question, builder, show_context, show_prompt))
    if answer is None:
        typer.echo("ERROR: Question is empty", err=True)
        raise typer.Exit(1)

    typer.secho("=== Answer ===", bold=True)
    typer.echo(answer)
    typer.secho(f"({session.generator.last_source or 'local'})", fg=typer.colors.BRIGHT_BLACK)


if __name__ == "__main__":
    app()
