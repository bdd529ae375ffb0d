"""
Review Link Generator - Web Server Entry Point
==============================================

Run this to start the web app:
    python main.py

Then open http://127.0.0.1:8000 in your browser.

Set GOOGLE_MAPS_API_KEY (environment or .env) before searching.
HOST, PORT and RELOAD override the server defaults.
"""

import os
import logging

import uvicorn

logging.basicConfig(level=logging.INFO)


def main():
    """Start the web server."""
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "").lower() in ("1", "true", "yes", "on")

    print("\n" + "=" * 50)
    print("   Review Link Generator")
    print("=" * 50)
    print(f"\n   Starting server at http://{host}:{port}")
    print("   Press Ctrl+C to stop\n")

    uvicorn.run(
        "review_link.web.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )


if __name__ == "__main__":
    main()
