# wger_catalog/ingestion/adapters/wger_plugin/models.py

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

R = TypeVar("R", bound="WgerRecord")


class WgerRecord(BaseModel):
    """Immutable record decoded from a wger JSON payload.

    Unknown fields are ignored; equality compares every field.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def decode(cls: type[R], payload: bytes | str) -> R:
        """Decode a wire payload with strict JSON types.

        "31", 31.0 or "yes" are rejected where an int or bool is declared.

        Raises:
            pydantic.ValidationError: Invalid JSON or a schema mismatch
        """
        return cls.model_validate_json(payload, strict=True)


class ImageRecord(WgerRecord):
    """An image attached to an exercise, with licensing metadata."""

    id: int | None = None
    uuid: str | None = None
    exercise_base: int | None = None
    exercise_base_uuid: str | None = None
    image: str | None = Field(default=None, description="Image URL")
    is_main: bool | None = None
    style: str | None = None

    # ========== LICENSING (carried through, not interpreted) ==========
    license: int | None = None
    license_title: str | None = None
    license_object_url: str | None = None
    license_author: str | None = None
    license_author_url: str | None = None
    license_derivative_source_url: str | None = None
    author_history: tuple[str, ...] | None = None


class ExerciseRecord(WgerRecord):
    """One exercise as returned by /exerciseinfo/{id}."""

    id: int | None = None
    uuid: str | None = None
    name: str | None = None
    exercise_base_id: int | None = None
    description: str | None = Field(default=None, description="HTML fragment")
    created: str | None = None
    images: tuple[ImageRecord, ...] | None = None
    variations: tuple[int, ...] | None = None

    @property
    def main_image(self) -> ImageRecord | None:
        """First image flagged as the main one."""
        for image in self.images or ():
            if image.is_main is True:
                return image
        return None

    @property
    def main_image_url(self) -> str | None:
        image = self.main_image
        return image.image if image else None

    @property
    def variation_ids(self) -> tuple[int, ...]:
        return self.variations or ()


class ExerciseListPage(WgerRecord):
    """Pagination envelope returned by /exerciseinfo."""

    count: int | None = None
    next: str | None = None
    previous: str | None = None
    results: tuple[ExerciseRecord, ...] | None = None

    @property
    def has_next(self) -> bool:
        return bool(self.next)


class ServerErrorBody(WgerRecord):
    """JSON body of a non-200 response."""

    detail: str
