"""Application configuration."""
import os

from dotenv import load_dotenv

load_dotenv()

# Remote catalog endpoint (fixed; the console has no backend of its own)
API_URL = "https://api.escuelajs.co/api/v1/products"

# No timeout is enforced on catalog requests
REQUEST_TIMEOUT: float | None = None

# Images
DEFAULT_IMAGE_URL = "https://placehold.co/600x400"
THUMBNAIL_PLACEHOLDER = "https://via.placeholder.com/50"
DETAIL_PLACEHOLDER = "https://via.placeholder.com/200"

# Table
PAGE_SIZE_OPTIONS = [5, 10, 20, 50]
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_BUTTONS = 5

# App settings
APP_TITLE = "Product Catalog Admin"
APP_PORT = int(os.getenv("APP_PORT", "8080"))
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
