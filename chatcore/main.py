"""
ASGI entry point.

    uvicorn chatcore.main:app --host 0.0.0.0 --port 5001
"""

from chatcore.fastapi_app import create_fastapi_app

app = create_fastapi_app()
