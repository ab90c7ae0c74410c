"""Draft editing and submission for the resource form modal.

A ``Draft`` is the transient, locally-held edit of one resource. It is built
fresh each time the modal opens, either blank (create) or from the loaded
document (edit), and is discarded on cancel or successful submit. Draft
values are kept as strings so they map one-to-one onto text inputs; the
wire conversion happens in ``to_payload``.
"""

import copy
import logging
from typing import Any, Dict, List, Optional

from .exceptions import AppError, ValidationError
from .models import FieldKind, ImageTarget, ModalMode
from .schemas import FieldSpec, ResourceSchema

logger = logging.getLogger(__name__)

RATING_MIN = 1
RATING_MAX = 5


def is_blank(value: Any) -> bool:
    """True for None, whitespace-only strings and lists of blank strings."""
    if value is None:
        return True
    if isinstance(value, (list, tuple)):
        return all(is_blank(v) for v in value)
    return not str(value).strip()


def parse_rating(value: Any) -> Optional[int]:
    """Parse a rating draft value. Returns None unless it is a whole number in range."""
    if is_blank(value):
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    if not number.is_integer():
        return None
    rating = int(number)
    if rating < RATING_MIN or rating > RATING_MAX:
        return None
    return rating


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _to_image_list(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        images = [_to_text(v) for v in value]
    elif is_blank(value):
        images = []
    else:
        images = [_to_text(value)]
    return images or [""]


class Draft:
    """Mutable draft mirroring a resource schema."""

    def __init__(self, schema: ResourceSchema, fields: Dict[str, str], items: List[Dict[str, Any]]):
        self.schema = schema
        self.fields = fields
        self.items = items or [schema.sub_entity.blank_row()]

    @classmethod
    def blank(cls, schema: ResourceSchema) -> "Draft":
        """Empty defaults for create mode."""
        fields = {f.name: f.blank_value() for f in schema.fields}
        return cls(schema, fields, [schema.sub_entity.blank_row()])

    @classmethod
    def from_document(cls, schema: ResourceSchema, document: Optional[Dict[str, Any]]) -> "Draft":
        """Seed a draft from a fetched document for edit mode."""
        if not document:
            return cls.blank(schema)

        fields = {f.name: _to_text(document.get(f.name)) for f in schema.fields}

        items = [cls._row_from_document(schema, row) for row in schema.document_rows(document)]
        return cls(schema, fields, items)

    @staticmethod
    def _row_from_document(schema: ResourceSchema, row: Any) -> Dict[str, Any]:
        sub = schema.sub_entity
        if not isinstance(row, dict):
            # Bare strings, e.g. a specialization stored as its title
            row = {sub.fields[0].name: row}
        else:
            row = dict(row)
            for alias, target in sub.read_aliases:
                if target not in row and alias in row:
                    row[target] = row[alias]

        result = {}
        for f in sub.fields:
            if f.kind == FieldKind.IMAGE_LIST:
                result[f.name] = _to_image_list(row.get(f.name))
            else:
                result[f.name] = _to_text(row.get(f.name))
        return result

    # Field edits
    def set_field(self, name: str, value: str) -> None:
        self.schema.field(name)
        self.fields[name] = value

    def append_item(self) -> None:
        self.items.append(self.schema.sub_entity.blank_row())

    def remove_item(self, index: int) -> bool:
        """Remove a sub-entity row. Refused (returns False) for the last row."""
        if len(self.items) <= 1:
            return False
        del self.items[index]
        return True

    def set_item_field(self, index: int, name: str, value: Any) -> None:
        self.schema.sub_entity.field(name)
        self.items[index][name] = value

    def append_item_image(self, index: int, name: str = "images") -> None:
        self._image_list(index, name).append("")

    def remove_item_image(self, index: int, name: str, image_index: int) -> bool:
        """Remove one image slot from a row. Refused for the last slot."""
        images = self._image_list(index, name)
        if len(images) <= 1:
            return False
        del images[image_index]
        return True

    def set_item_image(self, index: int, name: str, image_index: int, value: str) -> None:
        self._image_list(index, name)[image_index] = value

    def _image_list(self, index: int, name: str) -> List[str]:
        spec = self.schema.sub_entity.field(name)
        if spec.kind != FieldKind.IMAGE_LIST:
            raise KeyError(f"{name} is not an image list")
        return self.items[index][name]

    def apply_image(self, target: ImageTarget, url: str) -> None:
        """Write an uploaded image URL into exactly one draft slot."""
        if target.is_top_level:
            self.set_field(target.field, url)
        elif target.image_index is not None:
            self.set_item_image(target.index, target.field, target.image_index, url)
        else:
            self.set_item_field(target.index, target.field, url)

    # Validation and wire mapping
    def _key_fields(self) -> List[FieldSpec]:
        sub = self.schema.sub_entity
        return sub.required_fields or list(sub.fields)

    def _row_is_blank(self, row: Dict[str, Any]) -> bool:
        return all(is_blank(row.get(f.name)) for f in self.schema.sub_entity.fields)

    def _row_is_kept(self, row: Dict[str, Any]) -> bool:
        return all(not is_blank(row.get(f.name)) for f in self._key_fields())

    def validate(self) -> None:
        """Check required fields. Raises a single ValidationError listing every problem."""
        problems: List[str] = []

        missing = [f.label for f in self.schema.required_fields if is_blank(self.fields.get(f.name))]
        if missing:
            problems.append(f"Please fill in all required fields: {', '.join(missing)}.")

        sub = self.schema.sub_entity
        for i, row in enumerate(self.items, 1):
            if self._row_is_blank(row):
                continue
            row_missing = []
            for f in sub.required_fields:
                value = row.get(f.name)
                if is_blank(value):
                    row_missing.append(f.label)
                elif f.kind == FieldKind.RATING and parse_rating(value) is None:
                    problems.append(
                        f"{sub.item_label} {i}: rating must be a whole number from {RATING_MIN} to {RATING_MAX}."
                    )
            if row_missing:
                problems.append(f"{sub.item_label} {i} is missing: {', '.join(row_missing)}.")

        if problems:
            raise ValidationError(problems)

    def to_payload(self) -> Dict[str, Any]:
        """Map the draft to the wire format, dropping rows with blank required fields."""
        body: Dict[str, Any] = {}
        for f in self.schema.fields:
            value = self.fields.get(f.name)
            if is_blank(value):
                if f.omit_blank:
                    continue
                body[f.name] = f.wire_default
            else:
                body[f.name] = str(value).strip()

        sub = self.schema.sub_entity
        body[sub.key] = [self._row_payload(row) for row in self.items if self._row_is_kept(row)]
        return body

    def _row_payload(self, row: Dict[str, Any]) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in self.schema.sub_entity.fields:
            value = row.get(f.name)
            if f.kind == FieldKind.IMAGE_LIST:
                out[f.name] = [str(v).strip() for v in (value or []) if not is_blank(v)]
            elif f.kind == FieldKind.RATING:
                out[f.name] = parse_rating(value)
            elif is_blank(value):
                out[f.name] = f.wire_default
            else:
                out[f.name] = str(value).strip()
        return out


class FormModal:
    """Modal holding one draft and submitting it in create or edit mode."""

    def __init__(self, schema: ResourceSchema, mode: ModalMode, document: Optional[Dict[str, Any]] = None):
        self.schema = schema
        self.mode = ModalMode(mode)
        self.draft: Optional[Draft] = None
        if self.mode == ModalMode.CREATE:
            self.draft = Draft.blank(schema)
        elif self.mode == ModalMode.EDIT:
            self.draft = Draft.from_document(schema, copy.deepcopy(document))
        self.submitting = False
        self.uploading = False

    @property
    def title(self) -> str:
        return f"{self.mode.value.capitalize()} {self.schema.title}"

    def submit(self, client) -> Dict[str, Any]:
        """Validate and send the draft.

        Args:
            client: ResourceClient for this schema

        Returns:
            The server's response document

        Raises:
            ValidationError: If the draft is invalid (no request is made)
            RequestFailed: If the server rejects the request
        """
        if self.draft is None:
            raise AppError(f"Cannot submit a {self.mode.value} modal")

        self.draft.validate()
        payload = self.draft.to_payload()

        self.submitting = True
        try:
            if self.mode == ModalMode.CREATE:
                return client.create(payload)
            return client.replace(payload)
        finally:
            self.submitting = False

    def upload_image(self, uploader, target: ImageTarget, data: bytes, filename: str) -> str:
        """Upload an image and write its URL into the draft.

        The draft is left untouched if the upload fails.
        """
        if self.draft is None:
            raise AppError(f"Cannot upload images in a {self.mode.value} modal")

        self.uploading = True
        try:
            url = uploader.upload(data, filename)
        finally:
            self.uploading = False
        self.draft.apply_image(target, url)
        return url


__all__ = [
    "Draft",
    "FormModal",
    "is_blank",
    "parse_rating",
    "RATING_MIN",
    "RATING_MAX",
]
