"""Tool descriptor models and enums."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.slots import SlotName


class FieldKind(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"


class ComponentType(str, Enum):
    GENERIC = "generic"          # builds something new from short inputs
    TRANSFORMER = "transformer"  # rewrites pasted text


class LinkedView(str, Enum):
    """Dedicated workflows a tool can open instead of the generic form runner."""

    DASHBOARD = "dashboard"
    CONTENT = "content"
    SOCIAL = "social"
    BRIEFS = "briefs"
    STRATEGY = "strategy"
    ANALYST = "analyst"
    ASSISTANT = "assistant"
    TOOL_RUNNER = "tool_runner"
    COMING_SOON = "coming_soon"
    IMAGE_GEN = "image_gen"
    IMAGE_EDIT = "image_edit"
    SPEECH = "speech"
    LIVE_CHAT = "live_chat"


ALL_CATEGORY = "All"
FAVORITES_CATEGORY = "Favorites"

# Browse order shown to users. "All" and "Favorites" are virtual filters.
CATEGORIES: tuple[str, ...] = (
    ALL_CATEGORY,
    "Blog",
    "Social Media",
    "Copy",
    "SEO",
    "Email",
    "Descriptions",
    "Summary",
    "Repurpose",
    "Ads",
    "Video",
    "Images",
    "Translate",
    "Other",
    FAVORITES_CATEGORY,
)


@dataclass(frozen=True)
class FieldSpec:
    """One form input of a tool.

    Attributes:
        slot: Which of the four form slots the value fills.
        label: Human-readable label.
        placeholder: Example value shown in the empty input.
        kind: Rendering hint (single line, multi-line, or a fixed choice).
        options: ``(value, label)`` pairs for ``SELECT`` inputs, in display order.
        rows: Suggested height for ``TEXTAREA`` inputs.
        required: Whether the runner rejects an empty value.
    """

    slot: SlotName
    label: str
    placeholder: str = ""
    kind: FieldKind = FieldKind.TEXT
    options: tuple[tuple[str, str], ...] = ()
    rows: Optional[int] = None
    required: bool = True


@dataclass(frozen=True)
class ToolDescriptor:
    """Immutable catalog entry for one tool.

    A tool either opens a dedicated view (``linked_view``) or runs through the
    generic form runner, in which case it names the ``content_type`` whose
    template builds its prompt and the ``inputs`` that fill the slots.

    Attributes:
        id: Unique integer id; stable across releases (favorites store it).
        title: Display title; the catalog is listed sorted by this.
        description: One-line summary; searched together with the title.
        categories: Browse categories, in display order.
        bulk_enabled: Whether the tool supports batch input.
        linked_view: Dedicated view for complex workflows, else ``None``.
        component_type: Runner flavour for form-driven tools.
        content_type: Prompt template used by form-driven tools.
        inputs: Ordered form inputs; at most one per slot.
    """

    id: int
    title: str
    description: str
    categories: tuple[str, ...]
    bulk_enabled: bool = False
    linked_view: Optional[LinkedView] = None
    component_type: Optional[ComponentType] = None
    content_type: Optional[ContentType] = None
    inputs: tuple[FieldSpec, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.linked_view is None and self.content_type is None:
            raise ValueError(f"Tool {self.id} needs a linked view or a content type")
        slots = [spec.slot for spec in self.inputs]
        if len(slots) != len(set(slots)):
            raise ValueError(f"Tool {self.id} maps two inputs to the same slot")

    @property
    def runnable(self) -> bool:
        """True for tools served by the generic form runner."""
        return self.linked_view is None and self.content_type is not None

    def input_for(self, slot: SlotName) -> Optional[FieldSpec]:
        for spec in self.inputs:
            if spec.slot == slot:
                return spec
        return None


# ---------------------------------------------------------------------------
# Input builders used by the tool definition modules
# ---------------------------------------------------------------------------


def text(slot: SlotName, label: str, placeholder: str = "") -> FieldSpec:
    return FieldSpec(slot, label, placeholder, FieldKind.TEXT)


def textarea(slot: SlotName, label: str, placeholder: str = "", rows: Optional[int] = None) -> FieldSpec:
    return FieldSpec(slot, label, placeholder, FieldKind.TEXTAREA, rows=rows)


def select(slot: SlotName, label: str, choices: type[Enum] | list[str]) -> FieldSpec:
    """Build a ``SELECT`` input from an enum of labels or a plain list."""
    values = [member.value for member in choices] if isinstance(choices, type) else list(choices)
    return FieldSpec(
        slot,
        label,
        kind=FieldKind.SELECT,
        options=tuple((value, value) for value in values),
    )
