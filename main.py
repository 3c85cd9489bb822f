"""
OKLCH Color Tools MCP Server - FastAPI implementation
Provides endpoints for CSS color scanning, conversion and contrast checks
"""

import logging

from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

from config import get_settings
from routers import colorTools_router, contrastTools_router, scanTools_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="OKLCH Color Tools MCP Server",
    description="Find CSS color literals in text, convert them through OKLCH and grade APCA/WCAG contrast",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

# Mount routers
app.include_router(colorTools_router)
app.include_router(scanTools_router)
app.include_router(contrastTools_router)

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    logger.info("Serving color tools on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
