from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Attribute:
    name: str
    description: str
    required: bool = False
    sensitive: bool = False
    computed: bool = False

    @property
    def is_input(self) -> bool:
        return not self.computed


# Attributes of the "key" data source, in declaration order.
ATTRIBUTES = (
    Attribute(
        "password",
        "The password to generate a key for.",
        required=True,
        sensitive=True,
    ),
    Attribute(
        "salt",
        "The base64-encoded salt to use when generating the key. "
        "If not provided, a random salt will be generated.",
    ),
    Attribute(
        "iterations",
        "The number of iterations to use when generating the key. Defaults to 100,000.",
    ),
    Attribute(
        "key_length",
        "The byte length of the key to generate. "
        "Defaults to the length of the result of the hash function.",
    ),
    Attribute(
        "hash_function",
        "The hash function to use when generating the key. "
        "Supports `sha1`, `sha256`, and `sha512`.",
        required=True,
    ),
    Attribute("key", "The base64-encoded key.", computed=True),
)

INPUT_FIELDS = frozenset(a.name for a in ATTRIBUTES if a.is_input)


def describe() -> str:
    lines = []
    for a in ATTRIBUTES:
        if a.computed:
            flags = "computed"
        else:
            flags = "required" if a.required else "optional"
        if a.sensitive:
            flags += ", sensitive"
        lines.append(f"{a.name} ({flags})\n    {a.description}")
    return "\n".join(lines)
