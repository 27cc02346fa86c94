from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

API_GROUP: str = "risingwave.risingwavelabs.com"
KIND: str = "RisingWave"


class ResourceBase(BaseModel):
    """
    Base class for every versioned RisingWave resource fragment.

    Field names are snake_case in Python and camelCase on the wire, matching
    the JSON tags of the custom resource. Unknown keys are ignored so that
    manifests written for newer operator releases still load.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_manifest(self) -> dict[str, Any]:
        """Dump the fragment in its wire form, omitting unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


def wire_names(model: type[BaseModel]) -> set[str]:
    """Return both the Python and the wire names of a model's fields."""
    names: set[str] = set()
    for name, field in model.model_fields.items():
        names.add(name)
        if field.alias:
            names.add(field.alias)
    return names


def lift_inline_fields(
    data: Any,
    key: str,
    inlined: type[BaseModel],
    owner: type[BaseModel],
) -> Any:
    """
    Gather the keys of an inlined sub-object under ``key``.

    The CRD embeds some structs inline, so their keys sit next to the
    owner's own keys. Keys the owner declares itself win over keys of the
    inlined model.
    """
    if not isinstance(data, dict) or key in data:
        return data

    candidates = wire_names(inlined) - wire_names(owner)
    nested = {k: v for k, v in data.items() if k in candidates}
    if not nested:
        return data

    rest = {k: v for k, v in data.items() if k not in nested}
    rest[key] = nested
    return rest
