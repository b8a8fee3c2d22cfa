# campus_order/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

API_URL = os.getenv("API_URL", "http://localhost:3000")
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", 5))
HTTP_RETRY_ATTEMPTS = int(os.getenv("HTTP_RETRY_ATTEMPTS", 3))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
MOCK_BACKEND_HOST = os.getenv("MOCK_BACKEND_HOST", "0.0.0.0")
MOCK_BACKEND_PORT = int(os.getenv("MOCK_BACKEND_PORT", 3000))
