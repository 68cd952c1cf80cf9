from .config import ServiceConfig
from .decoders import Decoder, JSONDecoder
from .errors import (
    DecodingError,
    InvalidServerResponse,
    InvalidServerResponseWithStatusCode,
    MissingData,
    NetworkConnectionError,
    NetworkError,
    Underlying,
    WrongURLFormat,
)
from .models import Endpoint, Failure, Result, StaticEndpoint, Success
from .service import Service, ServiceProtocol, build_request
from .types import HTTPMethod

__all__ = [
    "DecodingError",
    "Decoder",
    "Endpoint",
    "Failure",
    "HTTPMethod",
    "InvalidServerResponse",
    "InvalidServerResponseWithStatusCode",
    "JSONDecoder",
    "MissingData",
    "NetworkConnectionError",
    "NetworkError",
    "Result",
    "Service",
    "ServiceConfig",
    "ServiceProtocol",
    "StaticEndpoint",
    "Success",
    "Underlying",
    "WrongURLFormat",
    "build_request",
]
