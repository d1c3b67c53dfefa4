import os
from dotenv import load_dotenv

load_dotenv(".env.local")

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/employees")
DB_NAME = os.getenv("DB_NAME", "employees")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

API_TITLE = os.getenv("API_TITLE", "Employee Company API")
API_VERSION = os.getenv("API_VERSION", "1.0.0")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", "1000"))
