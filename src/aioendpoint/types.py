from enum import Enum

# (value, field) pairs, applied in order.
Header = tuple[str, str]
# (name, value) pairs, a value of None renders as a bare name.
QueryItem = tuple[str, str | None]

Seconds = float | int


class HTTPMethod(Enum):
    get = "GET"
    post = "POST"
    put = "PUT"
    delete = "DELETE"
