"""
Main entry point for the FastAPI application.
Run this file to start the server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn chatcore.main:app --host 0.0.0.0 --port 5001 --reload
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from chatcore.config.settings import Config

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    debug = env == "development"

    print(f"Starting chat core in {env} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "chatcore.main:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        # reload and workers are mutually exclusive in uvicorn
        workers=None if debug else Config.WORKERS,
        log_level="info" if debug else "warning",
    )
