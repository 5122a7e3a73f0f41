#!/usr/bin/env python3
"""
run.py - Start the Creator Agent API with uvicorn.
"""

import uvicorn

from creator_agent.config import settings

if __name__ == "__main__":
    print(f"Starting {settings.APP_NAME} on port {settings.API_PORT}...")
    print(f"API documentation will be available at http://localhost:{settings.API_PORT}/docs")

    uvicorn.run("creator_agent.main:app", host="0.0.0.0", port=settings.API_PORT)
