from fastapi import FastAPI
import uvicorn
from contextlib import asynccontextmanager
from typing import Optional
import datetime

# Import core modules
from core.config import settings
from utils.logger import logger
from services.ledger_service import Ledger

def create_app(ledger: Optional[Ledger] = None) -> FastAPI:
    """
    Build the FastAPI application around a ledger.

    When no ledger is given, a database-backed one is created on startup
    from settings.DATABASE_URL and disposed of on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup and shutdown events."""
        
        logger.info(f"Starting {settings.APP_NAME}...")
        
        engine = None
        if getattr(app.state, "ledger", None) is None:
            from connect_db import create_db_engine, create_session_factory, init_db
            from services.ledger_service import DatabaseLedger
            
            logger.info("Initializing database ledger...")
            engine = create_db_engine(settings.DATABASE_URL)
            init_db(engine)
            app.state.ledger = DatabaseLedger(create_session_factory(engine))
        
        logger.info(f"Using ledger: {type(app.state.ledger).__name__}")
        
        yield
        
        # Cleanup
        logger.info(f"Shutting down {settings.APP_NAME}...")
        if engine is not None:
            engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Record expenses and query them by date",
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan
    )
    
    # Injected ledgers are available without running the lifespan
    app.state.ledger = ledger
    
    # Import routers after app creation to avoid circular imports
    from api import ledger as ledger_api
    
    app.include_router(ledger_api.router, tags=["Expenses"])
    
    @app.get("/health")
    async def health_check_endpoint():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat()
        }
    
    return app

if __name__ == "__main__":
    uvicorn.run(
        "main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        server_header=False,
        proxy_headers=True
    )
