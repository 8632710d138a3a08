import os
from dotenv import load_dotenv

load_dotenv()


class Settings():
    def __init__(self):
        # Server
        self.port: int = int(os.getenv("PORT", "3000"))
        self.host: str = os.getenv("HOST", "0.0.0.0")

        # Database
        self.database_path: str = os.getenv("DATABASE_PATH", "database.sqlite")

        # Logging
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # CORS
        self.allowed_origins: list = [
            origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()
        ]

    @property
    def database_url(self) -> str:
        # read-only: the service never writes to the store
        path = os.path.abspath(self.database_path)
        return f"sqlite+aiosqlite:///file:{path}?mode=ro&uri=true"


settings = Settings()
