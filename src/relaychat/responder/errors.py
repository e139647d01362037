"""Failure taxonomy for responder calls.

Every way an outbound call can fail maps to one of these exceptions. The
exchange controller catches them all and shows one generic notice; the
message of each exception is the diagnostic detail for the side channel.
"""


class ResponderError(Exception):
    """Base class for all responder failures."""


class ResponderTransportError(ResponderError):
    """The request could not be completed at the network level."""


class ResponderHTTPError(ResponderTransportError):
    """The responder answered with a non-success status code."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code


class EmptyResponseError(ResponderError):
    """The responder answered successfully but sent no body."""

    def __init__(self, message: str = "Received empty response from AI"):
        super().__init__(message)


class MalformedResponseError(ResponderError):
    """The body is not a JSON object."""

    def __init__(self, message: str = "Invalid response format from AI"):
        super().__init__(message)
