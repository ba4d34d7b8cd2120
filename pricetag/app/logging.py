import logging
from typing import Any, Dict, Iterable

from rich.logging import RichHandler

from pricetag.app.settings import Settings

# SDK loggers that log full request bodies (including base64 images) at INFO/DEBUG
CHATTY_LOGGERS = ("httpx", "httpcore", "urllib3", "botocore", "google", "openai")


class RedactSecretsFilter(logging.Filter):
    """Masks configured API keys in rendered log messages."""

    def __init__(self, secrets: Iterable[str | None]):
        super().__init__()
        self.secrets = [s for s in secrets if s]

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.secrets:
            return True
        message = record.getMessage()
        redacted = message
        for secret in self.secrets:
            redacted = redacted.replace(secret, "***")
        if redacted != message:
            record.msg, record.args = redacted, None
        return True


def configure_logging(settings: Settings) -> None:
    handler = RichHandler(rich_tracebacks=True)
    handler.addFilter(
        RedactSecretsFilter([settings.gemini_api_key, settings.openai_api_key, settings.langsmith_api_key])
    )
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[handler],
    )
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def event(msg: str, extra: Dict[str, Any] | None = None, level: int = logging.INFO) -> None:
    fields = " ".join(f"{key}={value}" for key, value in (extra or {}).items())
    logging.getLogger("pricetag").log(level, "%s %s", msg, fields)
