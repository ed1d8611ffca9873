from pydantic import BaseModel
import os

class Settings(BaseModel):
    """Application settings and configuration."""
    
    # App settings
    APP_NAME: str = "Expense Tracker"
    VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    # Database used by the ledger; any SQLAlchemy URL works
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./expenses.db")

# Create settings instance
settings = Settings()
