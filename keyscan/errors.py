"""Error taxonomy for resolver mode directives.

Every error raised while turning a directive into a policy derives from
ResolverModeError, which is a ValueError so callers that only care about
"bad input" can catch that.
"""


class ResolverModeError(ValueError):
    """Base class for directive and index validation failures."""


class InvalidIntegerError(ResolverModeError):
    """The numeric suffix of a directive is not a valid unsigned 32-bit decimal."""

    def __init__(self, text: str, reason: str = "invalid digit found in string"):
        self.text = text
        self.reason = reason
        super().__init__(f"Unable to parse resolver mode directive: {reason} ({text!r})")


class HardenedIndexError(ResolverModeError):
    """The index lies in the hardened half of the BIP32 index space."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(
            f"The actual value of the used index ({value}) corresponds to a "
            "hardened index, which can't be used in the current context"
        )


class UnrecognizedModeError(ResolverModeError):
    """The directive matches none of the known mode names."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unrecognized resolver mode name {name!r}")
