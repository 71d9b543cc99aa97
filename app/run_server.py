#!/usr/bin/env python3
"""
strcalc API Server Entry Point

Run with:
    python run_server.py

Or for development with auto-reload:
    uvicorn strcalc.server:app --reload --host 127.0.0.1 --port 8765
"""

import sys
import os

# Add the app directory to path for source checkouts
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import uvicorn

from strcalc.config import load_config


def main():
    """Start the strcalc API server."""
    config = load_config()

    print("=" * 50)
    print("  strcalc API Server")
    print("=" * 50)
    print()
    print(f"Starting server on http://{config.server_host}:{config.server_port}")
    print(f"Add endpoint: POST http://{config.server_host}:{config.server_port}/api/add")
    print()
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "strcalc.server:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
