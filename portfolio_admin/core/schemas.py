"""Declarative definitions of the five portfolio resources.

Each resource is a singleton JSON document served at its own API path. A
``ResourceSchema`` lists the top-level fields, the repeatable sub-entity and
the wire defaults; the generic draft, screen and page code is driven
entirely by these definitions.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .models import FieldKind


@dataclass(frozen=True)
class FieldSpec:
    """A single editable field."""
    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    placeholder: str = ""
    # Value sent on the wire when the draft value is blank
    wire_default: str = ""
    # Drop the key from the body entirely when blank
    omit_blank: bool = False

    def blank_value(self):
        """Empty draft value for this field."""
        return [""] if self.kind == FieldKind.IMAGE_LIST else ""


@dataclass(frozen=True)
class SubEntitySpec:
    """A repeatable nested row (specialization, project, service...)."""
    key: str
    label: str
    item_label: str
    fields: Tuple[FieldSpec, ...]
    # (alias, field) pairs accepted when reading a row
    read_aliases: Tuple[Tuple[str, str], ...] = ()

    @property
    def required_fields(self) -> List[FieldSpec]:
        return [f for f in self.fields if f.required]

    def field(self, name: str) -> FieldSpec:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(f"{self.key} has no field '{name}'")

    def blank_row(self) -> Dict:
        return {f.name: f.blank_value() for f in self.fields}


@dataclass(frozen=True)
class ResourceSchema:
    """Schema of one singleton resource document."""
    key: str
    title: str
    path: str
    fields: Tuple[FieldSpec, ...]
    sub_entity: SubEntitySpec
    icon: str = ""
    # (alias, sub-entity key) pairs accepted when reading a document
    read_aliases: Tuple[Tuple[str, str], ...] = ()

    @property
    def required_fields(self) -> List[FieldSpec]:
        return [f for f in self.fields if f.required]

    def field(self, name: str) -> FieldSpec:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(f"{self.key} has no field '{name}'")

    def document_rows(self, document: Dict) -> List:
        """Raw sub-entity rows of a document, honouring read aliases."""
        rows = document.get(self.sub_entity.key)
        if rows is None:
            for alias, target in self.read_aliases:
                if target == self.sub_entity.key and alias in document:
                    rows = document[alias]
                    break
        return list(rows or [])


ABOUT = ResourceSchema(
    key="about",
    title="About",
    path="/api/about",
    icon=":material/person:",
    fields=(
        FieldSpec("title", "Title", required=True, placeholder="e.g., About Our Studio"),
        FieldSpec("bio", "Bio", FieldKind.TEXTAREA, required=True, placeholder="Tell us about your studio..."),
        FieldSpec("image", "About Image", FieldKind.IMAGE, required=True),
    ),
    sub_entity=SubEntitySpec(
        key="specializations",
        label="Specializations",
        item_label="Specialization",
        fields=(
            FieldSpec("title", "Specialization", placeholder="e.g., Wedding Photography"),
        ),
    ),
)

PORTFOLIO = ResourceSchema(
    key="portfolio",
    title="Portfolio",
    path="/api/portfolio",
    icon=":material/photo_library:",
    fields=(
        FieldSpec("title", "Title", required=True, placeholder="e.g., Our Work"),
        FieldSpec("description", "Description", FieldKind.TEXTAREA, required=True),
    ),
    sub_entity=SubEntitySpec(
        key="projects",
        label="Projects",
        item_label="Project",
        fields=(
            FieldSpec("title", "Project Title", required=True),
            FieldSpec("description", "Project Description", FieldKind.TEXTAREA),
            FieldSpec("images", "Images", FieldKind.IMAGE_LIST),
            FieldSpec("category", "Category", required=True, placeholder="e.g., Wedding"),
        ),
        read_aliases=(("image", "images"),),
    ),
    read_aliases=(("items", "projects"),),
)

SERVICES = ResourceSchema(
    key="services",
    title="Services",
    path="/api/services",
    icon=":material/design_services:",
    fields=(
        FieldSpec("title", "Title", required=True, placeholder="e.g., Our Services"),
    ),
    sub_entity=SubEntitySpec(
        key="services",
        label="Services",
        item_label="Service",
        fields=(
            FieldSpec("title", "Service Title", required=True),
            FieldSpec("description", "Service Description", FieldKind.TEXTAREA, required=True),
            FieldSpec("image", "Service Image", FieldKind.IMAGE),
            FieldSpec("buttonText", "Button Text", placeholder="Learn More", wire_default="Learn More"),
        ),
    ),
)

TESTIMONIALS = ResourceSchema(
    key="testimonials",
    title="Testimonials",
    path="/api/testimonials",
    icon=":material/reviews:",
    fields=(
        FieldSpec("title", "Title", required=True, placeholder="e.g., What Our Clients Say"),
    ),
    sub_entity=SubEntitySpec(
        key="testimonials",
        label="Testimonials",
        item_label="Testimonial",
        fields=(
            FieldSpec("name", "Name", required=True),
            FieldSpec("title", "Job Title", required=True),
            FieldSpec("company", "Company", required=True),
            FieldSpec("text", "Testimonial", FieldKind.TEXTAREA, required=True),
            FieldSpec("image", "Photo", FieldKind.IMAGE),
            FieldSpec("rating", "Rating (1-5)", FieldKind.RATING, required=True),
        ),
    ),
)

CLIENTS = ResourceSchema(
    key="clients",
    title="Clients",
    path="/api/clients",
    icon=":material/handshake:",
    fields=(
        FieldSpec("title", "Title", required=True, placeholder="e.g., Our Clients"),
        FieldSpec("description", "Description", FieldKind.TEXTAREA, omit_blank=True),
    ),
    sub_entity=SubEntitySpec(
        key="clients",
        label="Clients",
        item_label="Client",
        fields=(
            FieldSpec("name", "Client Name", required=True),
            FieldSpec("description", "Client Description", FieldKind.TEXTAREA, required=True),
            FieldSpec("logo", "Logo", FieldKind.IMAGE),
            FieldSpec("website", "Website", FieldKind.URL, placeholder="https://"),
        ),
    ),
)


RESOURCES: Dict[str, ResourceSchema] = {
    schema.key: schema
    for schema in (ABOUT, PORTFOLIO, SERVICES, TESTIMONIALS, CLIENTS)
}


def get_schema(key: str) -> ResourceSchema:
    """Look up a resource schema by key."""
    try:
        return RESOURCES[key]
    except KeyError:
        raise KeyError(f"Unknown resource: {key}") from None


def list_schemas() -> List[ResourceSchema]:
    """All resource schemas in tab order."""
    return list(RESOURCES.values())


__all__ = [
    "FieldSpec",
    "SubEntitySpec",
    "ResourceSchema",
    "ABOUT",
    "PORTFOLIO",
    "SERVICES",
    "TESTIMONIALS",
    "CLIENTS",
    "RESOURCES",
    "get_schema",
    "list_schemas",
]
