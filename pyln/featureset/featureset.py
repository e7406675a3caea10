from enum import IntEnum
from typing import Union

from .invoice import MAX_BOLT11_FEATURE

# Feature bits are expressed as a u16, so this is the ceiling for contexts
# whose messages have room for more.
MAX_FEATURE_BIT = 0xFFFF


class FeatureSet(IntEnum):
    """The context a feature vector is being used in.

    Lightning has a single feature bit namespace, but which bits make sense
    (and how high they can go) depends on where the vector is sent:

     - INIT: the `init` message sent to a peer
     - LEGACY_GLOBAL: the legacy `globalfeatures` field of `init`, kept for
       peers that don't understand flat features
     - NODE_ANNOUNCEMENT: the `node_announcement` gossip message
     - INVOICE: the `9` field of BOLT #11 invoices we generate
     - INVOICE_AMP: the `9` field of AMP invoices we generate

    Members are plain ordinals, so `is_valid`, `display_name` and
    `maximum_feature_bit` also accept raw integers that may not name a
    member at all.
    """
    INIT = 0
    LEGACY_GLOBAL = 1
    NODE_ANNOUNCEMENT = 2
    INVOICE = 3
    INVOICE_AMP = 4

    def valid(self) -> bool:
        return is_valid(self)

    def maximum(self) -> int:
        return maximum_feature_bit(self)

    def __str__(self):
        return display_name(self)

    @classmethod
    def from_str(cls, s: str) -> 'FeatureSet':
        """Parse a feature set as it appears in configuration.

        Accepts the display name (`SetInvoice`), the member name in any case
        (`invoice_amp`) or one of the section keys lightningd uses for
        `featurebits` in a plugin manifest (`init`, `node`, `invoice`).
        """
        if s in _BY_DISPLAY_NAME:
            return _BY_DISPLAY_NAME[s]
        if s in _MANIFEST_KEYS:
            return _MANIFEST_KEYS[s]
        try:
            return cls[s.upper()]
        except KeyError:
            raise ValueError("Unknown feature set {!r}".format(s)) from None


# Marks the end of the known sets: must always equal the number of members,
# i.e. be one above the last one.
_SET_SENTINEL = len(FeatureSet)
assert(list(FeatureSet) == list(range(_SET_SENTINEL)))

_UNKNOWN_NAME = "SetUnknown"

_DISPLAY_NAMES = {
    FeatureSet.INIT: "SetInit",
    FeatureSet.LEGACY_GLOBAL: "SetLegacyGlobal",
    FeatureSet.NODE_ANNOUNCEMENT: "SetNodeAnn",
    FeatureSet.INVOICE: "SetInvoice",
    FeatureSet.INVOICE_AMP: "SetInvoiceAmp",
}
_BY_DISPLAY_NAME = {v: k for k, v in _DISPLAY_NAMES.items()}

_MANIFEST_KEYS = {
    'init': FeatureSet.INIT,
    'node': FeatureSet.NODE_ANNOUNCEMENT,
    'invoice': FeatureSet.INVOICE,
}


def is_valid(s: Union[FeatureSet, int]) -> bool:
    """Is `s` one of the predefined feature sets?

    Use this before trusting a value which didn't come from a `FeatureSet`
    member, e.g. one read from a config file or passed over RPC.
    """
    return 0 <= s < _SET_SENTINEL


def display_name(s: Union[FeatureSet, int]) -> str:
    """Human-readable name of `s`, `SetUnknown` if it isn't a known set.
    """
    return _DISPLAY_NAMES.get(s, _UNKNOWN_NAME)


def maximum_feature_bit(s: Union[FeatureSet, int]) -> int:
    """The highest feature bit that can be expressed in the context of `s`.

    The space available for feature bits differs between protocol messages.
    Nobody should get anywhere near these values, but they keep validation
    sane. Unknown sets get the permissive `MAX_FEATURE_BIT`: this does not
    check `is_valid`, callers have to do that themselves.
    """
    if s in (FeatureSet.INVOICE, FeatureSet.INVOICE_AMP):
        return MAX_BOLT11_FEATURE

    # Other messages have room for more than a u16 worth of bits, so just
    # return the largest bit we can express.
    return MAX_FEATURE_BIT


__all__ = [
    "FeatureSet",
    "MAX_FEATURE_BIT",
    "is_valid",
    "display_name",
    "maximum_feature_bit",
]
