"""Entry point for the Employee Directory API server.

Starts the FastAPI application under Uvicorn.  Host, port and log
level come from the environment (see
``employee_directory_api.app.core.config``) and may be overridden on
the command line.

Usage:
    python run.py [--host 127.0.0.1] [--port 3001]
"""
import argparse
import asyncio

from uvicorn import Config, Server

from employee_directory_api.app.core.config import settings
from employee_directory_api.app.main import app


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run the Employee Directory API.")
    ap.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"Port to listen on (default: {settings.port})")
    return ap.parse_args(argv)


async def serve(host: str, port: int) -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


def main(argv=None) -> None:
    args = parse_args(argv)
    asyncio.run(serve(args.host, args.port))


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
