"""Shared schema pieces: camelCase wire format and UTC instants."""
from datetime import datetime
from typing import Annotated
from pydantic import AfterValidator, AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from wellness_booking.domain.value_objects import to_instant

# Every timestamp leaving or entering the API is an aware UTC instant.
Instant = Annotated[datetime, AfterValidator(to_instant)]


class CamelIn(BaseModel):
    """Request body: accepts camelCase keys (snake_case also allowed)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelOut(BaseModel):
    """Response body: read from ORM attributes, emitted as camelCase."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )
