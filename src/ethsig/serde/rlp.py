"""
Recursive Length Prefix (RLP) encoding: arbitrarily nested lists of byte strings.

Encodable items: bytes/bytearray, str (UTF-8), non-negative int (big-endian with
no leading zeros, so 0 is the empty string), and list/tuple of encodable items.
Decoding yields bytes and (nested) lists of bytes.
"""

from __future__ import annotations

from typing import Optional, Union

from ..exceptions import RLPDecodingError

RlpItem = Union[bytes, list]

_SHORT_STRING = 0x80
_LONG_STRING = 0xB7
_SHORT_LIST = 0xC0
_LONG_LIST = 0xF7


def _encode_length(length: int, offset: int) -> bytes:
    """Prefix for a payload of `length` bytes; offset is 0x80 (string) or 0xc0 (list)."""
    if length < 56:
        return bytes([offset + length])
    len_bytes = length.to_bytes((length.bit_length() + 7) // 8, "big")
    if len(len_bytes) > 8:
        raise ValueError("payload too long for RLP")
    return bytes([offset + 55 + len(len_bytes)]) + len_bytes


def _rlp_encode_obj(obj, buf: bytearray) -> None:
    if isinstance(obj, (list, tuple)):
        payload = bytearray()
        for x in obj:
            _rlp_encode_obj(x, payload)
        buf.extend(_encode_length(len(payload), _SHORT_LIST))
        buf.extend(payload)
        return
    if isinstance(obj, int):
        if obj < 0:
            raise ValueError("RLP cannot encode negative integers")
        s = obj.to_bytes((obj.bit_length() + 7) // 8, "big")
    elif isinstance(obj, str):
        s = obj.encode("utf-8")
    elif isinstance(obj, (bytes, bytearray, memoryview)):
        s = bytes(obj)
    else:
        raise TypeError(f"rlp encode: unsupported type {type(obj)}")
    if len(s) == 1 and s[0] < _SHORT_STRING:
        buf.extend(s)
    else:
        buf.extend(_encode_length(len(s), _SHORT_STRING))
        buf.extend(s)


def rlp_encode(obj) -> bytes:
    """
    RLP-encode a byte string, text, integer, or nested list of those.

    Args:
        obj: Item to encode.

    Returns:
        Encoded bytes.
    """
    buf = bytearray()
    _rlp_encode_obj(obj, buf)
    return bytes(buf)


def _decode_header(data: bytes, pos: int) -> tuple[int, int, bool]:
    """(payload offset, payload length, is_list) for the item starting at pos."""
    prefix = data[pos]
    if prefix < _SHORT_STRING:
        return pos, 1, False
    if prefix <= _LONG_STRING:
        return pos + 1, prefix - _SHORT_STRING, False
    if prefix < _SHORT_LIST:
        return _decode_long(data, pos, prefix - _LONG_STRING, False)
    if prefix <= _LONG_LIST:
        return pos + 1, prefix - _SHORT_LIST, True
    return _decode_long(data, pos, prefix - _LONG_LIST, True)


def _decode_long(data: bytes, pos: int, len_of_len: int, is_list: bool) -> tuple[int, int, bool]:
    start = pos + 1 + len_of_len
    if start > len(data):
        raise RLPDecodingError("length prefix runs past end of input")
    return start, int.from_bytes(data[pos + 1 : start], "big"), is_list


def _decode_item(data: bytes, pos: int, end: int) -> tuple[RlpItem, int]:
    """Decode the item at pos, which must lie within data[:end]; returns (item, next pos)."""
    offset, length, is_list = _decode_header(data, pos)
    stop = offset + length
    if stop > end:
        raise RLPDecodingError("item length runs past end of input")
    if not is_list:
        return data[offset:stop], stop
    items = []
    cursor = offset
    while cursor < stop:
        item, cursor = _decode_item(data, cursor, stop)
        items.append(item)
    return items, stop


def rlp_decode(data: bytes) -> Optional[RlpItem]:
    """
    Decode the first RLP item in `data`.

    Returns:
        bytes for a string item, a list (possibly nested) for a list item, or
        None for empty input. Bytes after the first item are ignored.

    Raises:
        RLPDecodingError: when a length prefix points past the input.
    """
    data = bytes(data)
    if not data:
        return None
    item, _ = _decode_item(data, 0, len(data))
    return item


__all__: tuple[str, ...] = ("RlpItem", "rlp_decode", "rlp_encode")
