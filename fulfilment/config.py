import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///warehouse.db")
DB_BUSY_TIMEOUT = float(os.getenv("DB_BUSY_TIMEOUT", 5))
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
LEGACY_OUTPUT_DIR = os.getenv("LEGACY_OUTPUT_DIR", "legacy/")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
