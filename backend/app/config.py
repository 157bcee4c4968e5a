"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()

@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = "Page Heuristics Auditor"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    # SEO thresholds
    TITLE_MAX_LENGTH: int = int(os.getenv("TITLE_MAX_LENGTH", "60"))
    DESCRIPTION_MAX_LENGTH: int = int(os.getenv("DESCRIPTION_MAX_LENGTH", "160"))
    ALT_EXAMPLE_LIMIT: int = int(os.getenv("ALT_EXAMPLE_LIMIT", "3"))
    
    # UX thresholds
    LINK_EXAMPLE_LIMIT: int = int(os.getenv("LINK_EXAMPLE_LIMIT", "5"))
    LARGE_IMAGE_MAX_DIMENSION: int = int(os.getenv("LARGE_IMAGE_MAX_DIMENSION", "2000"))
    LARGE_IMAGE_EXAMPLE_LIMIT: int = int(os.getenv("LARGE_IMAGE_EXAMPLE_LIMIT", "3"))
    MOBILE_OVERFLOW_TOLERANCE: float = float(os.getenv("MOBILE_OVERFLOW_TOLERANCE", "1.05"))
    
    # WCAG AA minimum for normal-size text
    CONTRAST_MIN_RATIO: float = float(os.getenv("CONTRAST_MIN_RATIO", "4.5"))
    
    # CORS
    CORS_ORIGINS: List[str] = field(
        default_factory=lambda: os.getenv(
            "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
        ).split(",")
    )

settings = Settings()
