import bitstring


# BOLT #11:
#
# Each Tagged Field is of the form:
#
# 1. `type` (5 bits)
# 2. `data_length` (10 bits, big-endian)
# 3. `data` (`data_length` x 5 bits)
DATA_LENGTH_BITS = 10
MAX_DATA_LENGTH = 2**DATA_LENGTH_BITS - 1


def max_feature_bit_for_length(length: int) -> int:
    """Highest feature bit a `9` field of `length` 5-bit words can carry.
    """
    return length * 5 - 1


# The invoice feature field is limited by the tagged field length, so
# anything above this cannot be expressed in an invoice.
MAX_BOLT11_FEATURE = max_feature_bit_for_length(MAX_DATA_LENGTH)


def pack_data_length(length: int) -> bitstring.BitArray:
    """Pack a tagged field `data_length` (in 5-bit words) into its 10 bits.
    """
    if length < 0 or length > MAX_DATA_LENGTH:
        raise ValueError("Invalid data_length {}, must be in 0..{}".format(
            length, MAX_DATA_LENGTH))
    return bitstring.BitArray(
        bitstring.pack("uint:5, uint:5", length // 32, length % 32))


def unpack_data_length(stream: bitstring.ConstBitStream) -> int:
    """Read a tagged field `data_length` from `stream`.
    """
    if stream.len - stream.pos < DATA_LENGTH_BITS:
        raise ValueError("Too short to contain a data_length")
    return stream.read(5).uint * 32 + stream.read(5).uint


__all__ = [
    "DATA_LENGTH_BITS",
    "MAX_DATA_LENGTH",
    "MAX_BOLT11_FEATURE",
    "max_feature_bit_for_length",
    "pack_data_length",
    "unpack_data_length",
]
