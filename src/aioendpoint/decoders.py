from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


class Decoder(Protocol):
    def decode(self, data: bytes, target: type[T]) -> T:
        """
        Turn a response body into an instance of ``target``. Must raise if
        the body cannot be represented as ``target``.
        """
        ...


class JSONDecoder:
    """
    Validates a JSON body against ``target`` using pydantic, so pydantic
    models, dataclasses, TypedDicts and builtin containers all work.
    """

    def __init__(self, strict: bool | None = None) -> None:
        self.strict = strict
        self._adapters: dict[Any, TypeAdapter[Any]] = {}

    def _adapter(self, target: type[T]) -> TypeAdapter[T]:
        try:
            return self._adapters[target]
        except KeyError:
            adapter = self._adapters[target] = TypeAdapter(target)
            return adapter

    def decode(self, data: bytes, target: type[T]) -> T:
        return self._adapter(target).validate_json(data, strict=self.strict)
