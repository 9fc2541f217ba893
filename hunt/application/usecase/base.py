"""Base use case and shared request field types."""

from abc import ABC, abstractmethod
from typing import Annotated, Any

from pydantic import AfterValidator, AnyUrl, EmailStr, Field, TypeAdapter

_url = TypeAdapter(AnyUrl)
_email = TypeAdapter(EmailStr)


# Both checks validate only; the value is stored exactly as submitted
def _check_url(value: str) -> str:
    _url.validate_python(value)
    return value


def _check_email(value: str) -> str:
    _email.validate_python(value)
    return value


NonEmptyStr = Annotated[str, Field(min_length=1)]
UrlStr = Annotated[str, AfterValidator(_check_url)]
EmailAddressStr = Annotated[str, AfterValidator(_check_email)]


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
