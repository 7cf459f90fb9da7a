"""
Scatter-Brain Backend — Server Entry Point
===========================================

Usage:
    python -m scatterbrain              # listens on $PORT, default 9999
    PORT=8080 scatterbrain              # console script installed by pip

Configuration comes from the environment (see scatterbrain.config); there
are no command-line flags.
"""

import uvicorn

from scatterbrain.config import settings


def main() -> None:
    uvicorn.run(
        "scatterbrain.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
