"""
Color Tools MCP Server - FastAPI implementation
Provides endpoints for color parsing, conversion and manipulation
"""

from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

from colorproc import __version__
from config import configure_logging, load_settings
from routers import colorTools_router

app = FastAPI(
    title="Color Tools MCP Server",
    description="A FastAPI server for color parsing, conversion and manipulation",
    version=__version__
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

app.include_router(colorTools_router)

if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
