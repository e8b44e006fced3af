"""Error types and the shared error handler."""

from typing import Any, Optional, TYPE_CHECKING

from .texts import TextBundle, load_texts
from .utils.logging import get_logger

if TYPE_CHECKING:
    from .host import Notifier

logger = get_logger(__name__)


class MetadataWarning(Exception):
    """A condition the user can fix, e.g. no document or project selected.

    The message is shown to the user as is.
    """


class CrowdinAPIError(Exception):
    """Non-successful response from the Crowdin API."""

    def __init__(
        self,
        status: int,
        message: str,
        code: Optional[Any] = None,
    ):
        super().__init__(message)
        self.status = status
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status})"

    @classmethod
    def from_response(cls, status: int, body: Any) -> "CrowdinAPIError":
        """Build an error from a decoded Crowdin error body.

        Crowdin answers either ``{"error": {"code", "message"}}`` or, for
        validation failures, ``{"errors": [{"error": {"key", "errors": [...]}}]}``.
        """
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict):
                return cls(status, str(error.get("message", "")), error.get("code"))

            errors = body.get("errors")
            if isinstance(errors, list) and errors:
                messages = []
                for item in errors:
                    detail = item.get("error", {}) if isinstance(item, dict) else {}
                    key = detail.get("key", "")
                    for sub in detail.get("errors", []):
                        messages.append(f"{key}: {sub.get('message', '')}")
                if messages:
                    return cls(status, "; ".join(messages), "validation")

        if isinstance(body, str) and body:
            return cls(status, body)
        return cls(status, f"Request failed with status {status}")


class ErrorHandler:
    """Logs a caught error and surfaces it to the user through a notifier."""

    def __init__(self, notifier: "Notifier", texts: Optional[TextBundle] = None):
        self.notifier = notifier
        self.texts = texts or load_texts()

    def handle(self, error: BaseException) -> None:
        """Report an error. Never raises."""
        messages = self.texts.notifications.error

        if isinstance(error, MetadataWarning):
            logger.warning(str(error))
            text = str(error)
        elif isinstance(error, CrowdinAPIError):
            logger.error(f"Crowdin API error: {error}")
            try:
                text = messages.api.format(message=error.message)
            except (KeyError, IndexError, ValueError):
                logger.warning(f"Invalid API error template: {messages.api!r}")
                text = messages.unexpected
        else:
            logger.error(f"Unexpected error: {error!r}", exc_info=error)
            text = messages.unexpected

        try:
            self.notifier.message(text)
        except Exception as e:
            logger.warning(f"Could not show notification: {e}")
