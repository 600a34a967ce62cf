"""Article identifier."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArticleId:
    """Opaque article key wrapping a string."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("ArticleId must wrap a str")

    def __str__(self) -> str:
        return self.value
