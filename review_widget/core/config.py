from pydantic_settings import BaseSettings

DEFAULT_PROFANITY_WORDS = (
    "damn,shit,fuck,stupid,hate,terrible,awful,horrible,sucks,"
    "ass,asshole,bitch,bastard,hell,crap,piss,dick,cock,"
    "pussy,slut,whore,faggot,retard,idiot,moron,dumbass"
)


class Settings(BaseSettings):
    PROJECT_NAME: str = "Review Widget API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = ""

    # Runtime
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str | None = None

    # Storage: "memory" or "database"
    STORE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite+aiosqlite:///./reviews.db"
    SEED_DEMO_DATA: bool = True

    # Listing
    REVIEWS_PER_PAGE: int = 5
    MAX_REVIEWS_PER_PAGE: int = 50

    # Submission
    PROFANITY_WORDS: str = DEFAULT_PROFANITY_WORDS
    MIN_CONTENT_LENGTH: int = 10

    # CORS
    ALLOWED_ORIGINS: str = "*"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def cors_origins(self) -> list[str]:
        if self.ALLOWED_ORIGINS == "*":
            return ["*"]
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @property
    def profanity_words(self) -> list[str]:
        return [w.strip().lower() for w in self.PROFANITY_WORDS.split(",") if w.strip()]

    @property
    def log_level(self) -> str:
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return {
            "production": "INFO",
            "staging": "INFO",
            "development": "DEBUG",
            "test": "WARNING",
        }.get(self.ENVIRONMENT.lower(), "INFO")


settings = Settings()
