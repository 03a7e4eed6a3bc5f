class GameroomError(Exception):
    """Base class for errors raised by the gameroom client."""


class UnknownUserError(GameroomError):
    pass


class InvalidPayloadError(GameroomError):
    pass


class RequestFailedError(GameroomError):
    """The server rejected the request (4xx)."""


class ServerError(GameroomError):
    """The server failed (5xx) or could not be reached."""


class BatchSubmitError(GameroomError):
    pass


class ContractSetupError(GameroomError):
    pass
