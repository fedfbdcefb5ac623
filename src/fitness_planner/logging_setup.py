import asyncio
import logging
import re
import traceback

import httpx

from .config import SETTINGS

_tasks: list[asyncio.Task[None]] = []

_SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    # Slack/Discord style webhook secrets in URLs
    (re.compile(r"(hooks\.slack\.com/services/)[A-Za-z0-9/_-]+"), r"\1<REDACTED>"),
    (re.compile(r"(discord(?:app)?\.com/api/webhooks/)[A-Za-z0-9/_-]+"), r"\1<REDACTED>"),
    (re.compile(r"(Bearer\s+)[A-Za-z0-9._-]+"), r"\1<REDACTED>"),
    (re.compile(r"([?&](?:token|key|api_key)=)[^&\s]+"), r"\1<REDACTED>"),
]


class SensitiveDataFilter(logging.Filter):
    """
    Redact webhook secrets and bearer tokens from log messages.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            try:
                msg = record.getMessage()
            except (TypeError, ValueError):
                # leave malformed records for the handler to report
                return True
            record.args = ()
        elif isinstance(record.msg, str):
            msg = record.msg
        else:
            return True
        for pattern, repl in _SENSITIVE_PATTERNS:
            msg = pattern.sub(repl, msg)
        record.msg = msg
        return True


class AlertWebhookHandler(logging.Handler):
    """
    Logging handler that posts error logs to the configured alert webhook.
    """

    def emit(self, record: logging.LogRecord) -> None:
        if not SETTINGS.FF_ADMIN_ALERTS:
            return
        if not SETTINGS.ALERT_WEBHOOK_URL:
            return
        try:
            msg = self.format(record)
            # Compact stack if exists
            if record.exc_info:
                exc_text = "".join(traceback.format_exception(*record.exc_info))
                if len(exc_text) > 3500:
                    exc_text = exc_text[-3500:]
                    exc_text = "[truncated]\n" + exc_text
                msg = f"{msg}\n\n{exc_text}"
            url = SETTINGS.ALERT_WEBHOOK_URL
            data = {"text": msg[:3900]}

            async def _post() -> None:
                try:
                    async with httpx.AsyncClient(timeout=5.0) as client:
                        await client.post(url, json=data)
                except Exception as e:  # pragma: no cover - network
                    logging.getLogger(__name__).warning("Failed to send alert: %s", e)

            try:
                task = asyncio.get_running_loop().create_task(_post())
                _tasks.append(task)
                task.add_done_callback(_tasks.remove)
            except RuntimeError:
                # No running loop; fall back to blocking call
                try:
                    httpx.post(url, json=data, timeout=5.0)
                except Exception as e:  # pragma: no cover - network
                    logging.getLogger(__name__).warning("Failed to send alert: %s", e)
        except Exception as e:
            logging.getLogger(__name__).warning("Failed to send alert: %s", e)


def setup_logging(level: int | str | None = None) -> None:
    """
    Set up root logger with stream and alert webhook handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        return  # already configured
    root.setLevel(level if level is not None else SETTINGS.LOG_LEVEL)
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    redact = SensitiveDataFilter()
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    ch.addFilter(redact)
    root.addHandler(ch)
    alert = AlertWebhookHandler()
    alert.setLevel(logging.ERROR)
    alert.setFormatter(fmt)
    alert.addFilter(redact)
    root.addHandler(alert)
