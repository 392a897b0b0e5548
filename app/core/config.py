from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    DB_FILE: str = "users.json"
    BCRYPT_ROUNDS: int = 10

    # "development" devolve o detalhe de erros inesperados na resposta
    AMBIENTE: str = "production"

    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    HOST: str = "127.0.0.1"
    PORT: int = 3000

    class Config:
        env_file = ".env"

settings = Settings()
