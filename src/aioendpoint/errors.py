"""
Closed set of failures a :class:`~aioendpoint.service.Service` can report.

Every variant is its own dataclass; ``NetworkError`` is the union of
all of them, so callers can ``match`` on the variant and read its data.
Variants are exceptions only so that ``Failure.unwrap()`` can raise them.
"""
from dataclasses import dataclass


@dataclass
class WrongURLFormat(Exception):
    @property
    def description(self) -> str:
        return "URL format is wrong."

    def __str__(self) -> str:
        return self.description


@dataclass
class InvalidServerResponseWithStatusCode(Exception):
    status_code: int

    @property
    def description(self) -> str:
        return (
            "The server response didn't fall in the given range "
            f"Status Code is: {self.status_code}"
        )

    def __str__(self) -> str:
        return self.description


@dataclass
class InvalidServerResponse(Exception):
    @property
    def description(self) -> str:
        return "Failed to parse the response to HTTPResponse"

    def __str__(self) -> str:
        return self.description


@dataclass
class MissingData(Exception):
    @property
    def description(self) -> str:
        return "No body data provided from the server"

    def __str__(self) -> str:
        return self.description


@dataclass
class DecodingError(Exception):
    cause: Exception

    @property
    def description(self) -> str:
        return f"Decoding problem: {self.cause}"

    def __str__(self) -> str:
        return self.description


@dataclass
class NetworkConnectionError(Exception):
    cause: Exception

    @property
    def description(self) -> str:
        return f"Network connection seems to be offline: {self.cause}"

    def __str__(self) -> str:
        return self.description


@dataclass
class Underlying(Exception):
    cause: Exception

    @property
    def description(self) -> str:
        return str(self.cause)

    def __str__(self) -> str:
        return self.description


NetworkError = (
    WrongURLFormat
    | InvalidServerResponseWithStatusCode
    | InvalidServerResponse
    | MissingData
    | DecodingError
    | NetworkConnectionError
    | Underlying
)
