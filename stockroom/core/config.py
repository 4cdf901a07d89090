import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    firebase_service_account_key_path: str = os.getenv("FIREBASE_SERVICE_ACCOUNT_KEY_PATH", "")
    firebase_project_id: str = os.getenv("FIREBASE_PROJECT_ID", "")
    inventory_collection: str = os.getenv("INVENTORY_COLLECTION", "inventory")

    service_name: str = os.getenv("SERVICE_NAME", "stockroom")
    service_version: str = os.getenv("SERVICE_VERSION", "1.0.0")
    environment: str = os.getenv("ENVIRONMENT", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
