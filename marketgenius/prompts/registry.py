"""
Prompt template registry.

One template function per ``ContentType``, registered with ``@template``.
Each registration declares the template's named fields and which form slot
feeds each of them, so there are two equivalent ways in:

- ``PromptRequest``: the tagged request: a content type plus its own named
  fields (``{"product": ..., "duration": ...}``).  ``render()`` turns it into
  a prompt string.
- ``build_prompt(content_type, topic, audience, tone, goal)``: the positional
  four-slot form used by tool forms.  Slots are mapped onto named fields by
  the registration, then rendered.

Invariants:
    1. Every ``ContentType`` member has exactly one template.  Duplicate
       registration raises; ``verify_registry()`` raises if any member is
       missing and runs when ``marketgenius.prompts`` is imported.
    2. ``build_prompt`` is total over content types: an unknown value falls
       back to a generic prompt instead of failing.
    3. Templates are pure: same fields in, same string out.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.errors import UnknownFieldsError
from marketgenius.prompts.slots import SLOT_ORDER, SlotName

logger = logging.getLogger(__name__)

TemplateFn = Callable[..., str]
SlotAdapter = Callable[[Mapping[SlotName, str]], dict[str, str]]


@dataclass(frozen=True)
class TemplateSpec:
    """Registration record for one content type.

    Attributes:
        content_type: The content type this template renders.
        slots: Ordered mapping from form slot to the template's field name.
            Slots absent from the mapping are ignored by this content type.
        render: Keyword-only template function taking exactly the named fields.
        adapter: Optional custom slot→field conversion for content types whose
            slots do not map one-to-one (e.g. a JSON-packed slot).  Receives all
            four slots; may raise ``PromptBuildError``.
        extra_fields: Named fields reachable only through ``PromptRequest``
            (populated by ``adapter`` on the slot path).
    """

    content_type: ContentType
    slots: tuple[tuple[SlotName, str], ...]
    render: TemplateFn
    adapter: SlotAdapter | None = None
    extra_fields: tuple[str, ...] = ()

    @property
    def field_names(self) -> tuple[str, ...]:
        names = [name for _, name in self.slots]
        names.extend(n for n in self.extra_fields if n not in names)
        return tuple(names)

    def fields_from_slots(self, slots: Mapping[SlotName, str]) -> dict[str, str]:
        if self.adapter is not None:
            return self.adapter(slots)
        return {name: slots.get(slot, "") for slot, name in self.slots}


_TEMPLATES: dict[ContentType, TemplateSpec] = {}


def template(
    content_type: ContentType,
    *,
    adapter: SlotAdapter | None = None,
    extra_fields: tuple[str, ...] = (),
    **slot_fields: str,
) -> Callable[[TemplateFn], TemplateFn]:
    """Register the decorated function as the template for ``content_type``.

    Keyword arguments name the field fed by each slot, e.g.
    ``@template(ContentType.POEM, topic="theme", audience="style")``.
    """
    slots = tuple(
        (SlotName(slot), name) for slot, name in slot_fields.items()
    )
    slots = tuple(sorted(slots, key=lambda pair: SLOT_ORDER.index(pair[0])))

    def decorator(fn: TemplateFn) -> TemplateFn:
        if content_type in _TEMPLATES:
            raise ValueError(f"Duplicate template for {content_type.name}")
        _TEMPLATES[content_type] = TemplateSpec(
            content_type=content_type,
            slots=slots,
            render=fn,
            adapter=adapter,
            extra_fields=extra_fields,
        )
        return fn

    return decorator


def get_template(content_type: ContentType) -> TemplateSpec:
    """Return the registration for ``content_type``. Raises KeyError if absent."""
    return _TEMPLATES[content_type]


def missing_templates() -> list[ContentType]:
    """Content types with no registered template, in declaration order."""
    return [ct for ct in ContentType if ct not in _TEMPLATES]


def verify_registry() -> None:
    """Raise ``RuntimeError`` unless every content type has a template."""
    missing = missing_templates()
    if missing:
        names = ", ".join(ct.name for ct in missing)
        raise RuntimeError(f"Prompt templates missing for: {names}")


@dataclass(frozen=True)
class PromptRequest:
    """A generation request tagged with its content type and named fields.

    Fields not supplied render as empty strings, matching an untouched form.
    """

    content_type: ContentType
    fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        spec = get_template(self.content_type)
        unknown = [name for name in self.fields if name not in spec.field_names]
        if unknown:
            raise UnknownFieldsError(self.content_type.value, unknown)

    @classmethod
    def from_slots(
        cls,
        content_type: ContentType,
        topic: str = "",
        audience: str = "",
        tone: str = "",
        goal: str = "",
    ) -> PromptRequest:
        """Build a request from the four positional form slots."""
        spec = get_template(content_type)
        slots = {
            SlotName.TOPIC: topic,
            SlotName.AUDIENCE: audience,
            SlotName.TONE: tone,
            SlotName.GOAL: goal,
        }
        return cls(content_type, spec.fields_from_slots(slots))


def render(request: PromptRequest) -> str:
    """Render a tagged request into the prompt sent to the model."""
    spec = get_template(request.content_type)
    values = {name: request.fields.get(name, "") for name in spec.field_names}
    return spec.render(**values)


def fallback_prompt(topic: str) -> str:
    return f"Generate content for topic: {topic}"


def build_prompt(
    content_type: ContentType | str,
    topic: str = "",
    audience: str = "",
    tone: str = "",
    goal: str = "",
) -> str:
    """Build the prompt for a content type from the four form slots.

    Unknown content types get a generic prompt.  The brief-driven article
    type raises ``InvalidBriefPayloadError`` when its ``goal`` slot is not
    valid JSON; callers report that as a user-facing error.
    """
    try:
        resolved = ContentType(content_type)
    except ValueError:
        logger.warning(f"Unknown content type {content_type!r}; using generic prompt")
        return fallback_prompt(topic)

    if resolved not in _TEMPLATES:
        logger.warning(f"No template registered for {resolved.name}; using generic prompt")
        return fallback_prompt(topic)

    return render(PromptRequest.from_slots(resolved, topic, audience, tone, goal))
