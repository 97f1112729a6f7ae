from typing import Optional

from aiohttp import ClientResponse


class GangwayException(Exception):
    pass


class WebhookValidationError(GangwayException, ValueError):
    pass


class TransportError(GangwayException):
    def __init__(self, message: str, original: Optional[BaseException] = None):
        self.original = original

        super().__init__(message)


class HTTPException(TransportError):
    def __init__(self, response: ClientResponse, text: str):
        self.response = response
        self.status = response.status
        self.text = text

        super().__init__(f"Webhook request failed with status {self.status}: {text}")
