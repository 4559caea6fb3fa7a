# dashboard/config.py

from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    """Dashboard configuration"""
    
    # App settings
    app_name: str = "Career Documents ATS Scorer"
    debug: bool = False
    
    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    
    # Scoring
    ats_config_path: str = os.getenv("ATS_CONFIG", "config/ats.yaml")
    max_text_chars: int = 100_000
    
    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
