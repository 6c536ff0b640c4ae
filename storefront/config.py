# storefront/config.py
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent

class Config:
    """Configuration settings for the storefront core"""

    # Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    DB_POOL_MIN_SIZE: int = int(os.getenv("DB_POOL_MIN_SIZE", "2"))
    DB_POOL_MAX_SIZE: int = int(os.getenv("DB_POOL_MAX_SIZE", "10"))

    # Payment gateway settings
    BRAINTREE_ENVIRONMENT: str = os.getenv("BRAINTREE_ENVIRONMENT", "sandbox")
    BRAINTREE_MERCHANT_ID: str = os.getenv("BRAINTREE_MERCHANT_ID", "")
    BRAINTREE_PUBLIC_KEY: str = os.getenv("BRAINTREE_PUBLIC_KEY", "")
    BRAINTREE_PRIVATE_KEY: str = os.getenv("BRAINTREE_PRIVATE_KEY", "")
    GATEWAY_TIMEOUT: float = float(os.getenv("GATEWAY_TIMEOUT", "30"))

    # Other settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Paths
    LOG_DIR = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))

    @classmethod
    def validate(cls):
        """Fail fast on settings the process cannot start without"""
        if not cls.DATABASE_URL:
            raise ValueError("No DATABASE_URL set in environment")

        for name in ("BRAINTREE_MERCHANT_ID", "BRAINTREE_PUBLIC_KEY", "BRAINTREE_PRIVATE_KEY"):
            if not getattr(cls, name):
                raise ValueError(f"No {name} set in environment")

        if cls.BRAINTREE_ENVIRONMENT not in ("sandbox", "production"):
            raise ValueError(f"Unknown BRAINTREE_ENVIRONMENT: {cls.BRAINTREE_ENVIRONMENT}")

def setup_logging():
    """Configure logging settings"""
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    Config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = Config.LOG_DIR / "storefront.log"

    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format=log_format,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )
