import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# MongoDB configuration
MONGODB_URL = os.getenv("MONGODB_URL", "mongodb://localhost:27017")
MONGODB_DB_NAME = os.getenv("MONGODB_DB_NAME", "flashcards")

# Server configuration
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Destructive reseed route (GET /init) is only mounted when this is set
ENABLE_SEED_ROUTE = _env_flag("ENABLE_SEED_ROUTE")

# Cards created from a bare base64 string carry no content type of their own
DEFAULT_CARD_IMAGE_TYPE = os.getenv("DEFAULT_CARD_IMAGE_TYPE", "image/png")

# App configuration
APP_TITLE = "Flashcards API"
APP_VERSION = "1.0"
APP_DESCRIPTION = "FastAPI backend for the flashcard study app"

# CORS origins
# Expo dev server and local web testing are allowed by default.
# Add any other client origins through the CORS_ORIGINS variable.
CORS_ORIGINS_ENV = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS = [
    "exp://192.168.1.15:8081",
    "http://192.168.1.15:8081",
    "http://localhost:3000",
]
if CORS_ORIGINS_ENV:
    CORS_ORIGINS.extend([origin.strip() for origin in CORS_ORIGINS_ENV.split(",") if origin.strip()])

CORS_CREDENTIALS = True
CORS_METHODS = ["*"]
CORS_HEADERS = ["*"]
