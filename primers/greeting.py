"""Greeting written to any text stream, and a web server serving it."""

import io
import sys
from wsgiref.simple_server import make_server

PORT = 5001


def greet(writer, name):
    """Write a greeting for ``name`` to ``writer``."""
    writer.write(f"Hello, {name}")


def greeter_app(environ, start_response):
    """WSGI application that greets the world."""
    body = io.StringIO()
    greet(body, "world")
    start_response("200 OK", [("Content-Type", "text/plain; charset=utf-8")])
    return [body.getvalue().encode("utf-8")]


def main(argv=None):
    """Serve the greeting on port 5001 until interrupted."""
    try:
        with make_server("", PORT, greeter_app) as server:
            server.serve_forever()
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0