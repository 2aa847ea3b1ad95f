"""Hashing utilities."""

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a hash over the UTF-16 code units of `text`.

    Matches the hash the site's front-end computes with charCodeAt, so keys
    hash identically on both sides.
    """
    h = FNV_OFFSET_BASIS
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return h
