__version__ = "0.1.0"

from .client import Webhook
from .color import Color
from .errors import GangwayException, HTTPException, TransportError, WebhookValidationError
from .impl import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedThumbnail,
    WebhookMessage,
)
