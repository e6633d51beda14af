"""Production startup script for the Heading Outline Analyzer.

Reads host, port and worker count from application settings (API_HOST,
API_PORT, API_WORKERS) and replaces the current process with uvicorn.
"""

import os
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from api.config import Settings, get_settings  # noqa: E402

APP_PATH = "api.main:app"


def build_uvicorn_args(settings: Settings) -> list[str]:
    """Build the uvicorn command line for the given settings."""
    args = [
        "uvicorn",
        APP_PATH,
        "--host",
        settings.api_host,
        "--port",
        str(settings.api_port),
        "--workers",
        str(settings.api_workers),
        "--log-level",
        settings.log_level.lower(),
    ]
    if settings.is_production:
        args.extend(["--proxy-headers", "--forwarded-allow-ips", "*"])
    return args


def main() -> None:
    """Main entry point."""
    settings = get_settings()
    args = build_uvicorn_args(settings)

    print(
        f"Starting API server on {settings.api_host}:{settings.api_port} "
        f"with {settings.api_workers} worker(s)..."
    )

    # uvicorn handles SIGTERM/SIGINT itself once it owns the process
    os.execvp(args[0], args)


if __name__ == "__main__":
    main()
