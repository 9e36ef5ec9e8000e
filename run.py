#!/usr/bin/env python3
"""Start the UI Forge API server (uvicorn, settings from config/)."""
import argparse

import uvicorn

from uiforge.api.dependencies import get_config

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reload", action="store_true", help="restart on source changes")
    args = parser.parse_args()

    server = get_config().server
    uvicorn.run(
        "uiforge.main:app",
        host=server.host,
        port=server.port,
        reload=args.reload,
    )
