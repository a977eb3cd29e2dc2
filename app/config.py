from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENV: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "testdb"
    MONGO_EVENTS_COLLECTION: str = "events"
    MONGO_CONNECT_TIMEOUT_MS: int = 2000
    STATIC_DIR: str = "public"


settings = Settings()
