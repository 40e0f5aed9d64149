"""
Color Convert MCP Server - FastAPI implementation
Provides endpoints for converting color codes between hex, hsl, oklab, oklch and rgb
"""

import logging

from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

from config import Config
from routers import colorTools_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title=Config.APP_NAME,
    description="A FastAPI server for color format detection and conversion",
    version=Config.APP_VERSION
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

app.include_router(colorTools_router)


def run() -> None:
    """Mount the MCP server and serve the app."""
    Config.configure_logging()
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    logger.info("Starting %s on %s:%d", Config.APP_NAME, Config.HOST, Config.PORT)
    uvicorn.run(app, host=Config.HOST, port=Config.PORT)


if __name__ == "__main__":
    run()
