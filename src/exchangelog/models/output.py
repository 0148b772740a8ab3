"""Output formatting models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FormatOptions(BaseModel):
    """Options controlling which parts of an exchange are formatted.

    Field names also validate by their camelCase alias, e.g. ``showAll``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    show_exchange_id: bool = False
    show_properties: bool = False
    show_headers: bool = False
    show_body_type: bool = True
    show_body: bool = True
    show_out: bool = False
    show_exception: bool = False
    show_caught_exception: bool = False
    show_stack_trace: bool = False
    show_all: bool = False  # Forces every section on, except show_future
    multiline: bool = False
    show_future: bool = False  # Wait for pending bodies to complete
    max_chars: int = Field(default=0, ge=0)  # Max chars per line, 0 = unlimited
