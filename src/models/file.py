"""File model holding categorised character content."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from src.models.errors import InvalidContentError, WrongCategoryError
from src.models.file_category import FileCategory
from src.utils.logger import get_logger

logger = get_logger(__name__)


def _to_code_units(chars: str | Sequence[str]) -> list[str]:
    """Split text into UTF-16 code units, one single-character string per unit.

    Characters outside the BMP become their surrogate pair.
    """
    if isinstance(chars, str):
        text = chars
    elif isinstance(chars, Sequence) and all(
        isinstance(char, str) and len(char) == 1 for char in chars
    ):
        text = "".join(chars)
    else:
        msg = "content must be a string or a sequence of single characters"
        raise InvalidContentError(msg)

    encoded = text.encode("utf-16-be", "surrogatepass")
    return [
        encoded[i : i + 2].decode("utf-16-be", "surrogatepass") for i in range(0, len(encoded), 2)
    ]


class File(BaseModel):
    """In-memory file with a category and an append-only character payload.

    Content can only be appended while the category is PROPERTY.
    """

    model_config = ConfigDict(validate_assignment=True)

    category: FileCategory | None = None
    _content: tuple[str, ...] = PrivateAttr(default=())

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, value: object) -> object:
        """Accept category names in any case, e.g. PROPERTY or Property."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def set_category(self, category: FileCategory | str) -> None:
        """Assign the file category."""
        self.category = category  # type: ignore[assignment]

    def append_content(self, chars: str | Sequence[str] | None) -> None:
        """Append characters, in order, to the end of the content.

        Raises:
            InvalidContentError: chars is None or not a sequence of characters.
            WrongCategoryError: the file category is not PROPERTY.
        """
        if chars is None:
            msg = "content must not be None"
            raise InvalidContentError(msg)

        units = _to_code_units(chars)

        if self.category is not FileCategory.PROPERTY:
            logger.warning(
                "append_rejected",
                category=self.category.value if self.category else None,
                length=len(units),
            )
            raise WrongCategoryError(self.category)

        # Rebound rather than mutated so model_copy() never shares content.
        self._content = (*self._content, *units)
        logger.debug("content_appended", appended=len(units), content_length=len(self._content))

    def get_content(self) -> list[str]:
        """Return a copy of the content as a list of single characters."""
        return list(self._content)

    @property
    def content_length(self) -> int:
        """Number of stored UTF-16 code units."""
        return len(self._content)

    def is_empty(self) -> bool:
        return not self._content
