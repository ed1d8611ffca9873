#!/usr/bin/env python3
"""
Startup script for the expense tracker backend
"""
import uvicorn

from core.config import settings
from main import create_app
from utils.logger import logger

if __name__ == "__main__":
    logger.info(f"Database: {settings.DATABASE_URL}")
    logger.info(f"Listening on {settings.HOST}:{settings.PORT}")
    
    # Start the server
    uvicorn.run(
        create_app(),
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower()
    )
