from pydantic import BaseModel, ConfigDict
import os

from dotenv import load_dotenv

from errors import ConfigurationError

STOCKFISH_API_URL = "https://stockfish.online/api/s/v2.php"
DEFAULT_PRICE = "$0.001"

REQUIRED_VARS = ("FACILITATOR_URL", "ADDRESS", "NETWORK")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    facilitator_url: str
    pay_to: str
    network: str
    host: str = "0.0.0.0"
    port: int = 4021
    stockfish_api_url: str = STOCKFISH_API_URL
    price: str = DEFAULT_PRICE
    log_level: str = "INFO"
    cors_origins: str = "*"


def load_settings(env: dict | None = None, dotenv: bool = True) -> Settings:
    """Build the process-wide settings from the environment.

    Args:
        env: Mapping to read from instead of ``os.environ``.
        dotenv: Load a ``.env`` file into ``os.environ`` first.

    Raises:
        ConfigurationError: If any of FACILITATOR_URL, ADDRESS or NETWORK
            is missing or empty.
    """
    if dotenv and env is None:
        load_dotenv()
    env = os.environ if env is None else env

    missing = [name for name in REQUIRED_VARS if not env.get(name)]
    if missing:
        raise ConfigurationError(
            "Missing required environment variables: " + ", ".join(missing)
        )

    return Settings(
        facilitator_url=env["FACILITATOR_URL"],
        pay_to=env["ADDRESS"],
        network=env["NETWORK"],
        host=env.get("HOST", "0.0.0.0"),
        port=int(env.get("PORT", "4021")),
        stockfish_api_url=env.get("STOCKFISH_API_URL", STOCKFISH_API_URL),
        price=env.get("PRICE", DEFAULT_PRICE),
        log_level=env.get("LOG_LEVEL", "INFO"),
        cors_origins=env.get("CORS_ORIGINS", "*"),
    )
