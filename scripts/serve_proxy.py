#!/usr/bin/env python3
"""
Serve the backend proxy locally over http.server.

Every request path is routed to the proxy handler, so point PROXY_BASE_URL at
http://HOST:PORT and keep transport.proxy.path as configured.

Examples:\n

    $ python scripts/serve_proxy.py

    $ LLM_PROVIDER=anthropic python scripts/serve_proxy.py --port 9000
"""

from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Optional

import typer

from resume_chat.app import build_prompt_builder, provider_factory
from resume_chat.config import load_settings
from resume_chat.contexts.generation.proxy import ProxyResponse, handle_proxy_request
from resume_chat.utils.logger import setup_logger

app = typer.Typer(add_completion=False, help="Serve the LLM proxy for resume chat.")


def make_handler(settings) -> type:
    """Build a request handler class bound to the given settings."""
    factory = provider_factory(settings)
    builder = build_prompt_builder(settings)

    class ProxyRequestHandler(BaseHTTPRequestHandler):
        def _handle(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length else b""
            self._respond(handle_proxy_request(self.command, body, factory, builder))

        def _respond(self, response: ProxyResponse) -> None:
            payload = response.body_bytes()
            self.send_response(response.status_code)
            for name, value in response.headers.items():
                self.send_header(name, value)
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)

        do_POST = _handle
        do_OPTIONS = _handle
        do_GET = _handle
        do_PUT = _handle
        do_DELETE = _handle

        def log_message(self, format, *args):
            # Request results are logged by the proxy handler
            pass

    return ProxyRequestHandler


@app.command()
def main(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8787, "--port", "-p", help="Port to listen on"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings YAML to merge"),
):
    """Run the proxy until interrupted."""
    settings = load_settings(config)
    setup_logger(
        "proxy",
        settings.logging.log_dir,
        extra_provenance={"LLM provider": settings.llm.provider},
        level=settings.logging.level,
    )

    server = ThreadingHTTPServer((host, port), make_handler(settings))
    typer.echo(f"Proxy listening on http://{host}:{port}{settings.transport.proxy.path}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()


if __name__ == "__main__":
    app()
