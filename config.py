from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process configuration, read from the environment or a ``.env`` file."""

    # Status source
    STATUS_URL: str = "https://status.escapefromtarkov.com/api/message/list"
    STATUS_PAGE_URL: str = "https://status.escapefromtarkov.com"
    STATUS_LOGO_URL: str = "https://www.escapefromtarkov.com/themes/eft/images/logo.png"
    POLL_INTERVAL_SECONDS: float = Field(default=30.0, gt=0)
    KEEP_STATE_ON_FETCH_FAILURE: bool = False

    # Discord webhook; console output when empty
    WEBHOOK_URL: str = ""
    WEBHOOK_USERNAME: str = "Escape from Tarkov Status"
    LOCALE: str = "en"

    # DeepL; translation disabled when the key is empty
    DEEPL_API_KEY: str = ""
    DEEPL_API_URL: str = "https://api-free.deepl.com/v2/translate"
    TARGET_LANG: str = "FR"

    HTTP_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
