# utils.py

from base58 import b58encode


def b58encode_str(data: bytes) -> str:
    return b58encode(data).decode("ascii")


def format_byte_array(data: bytes) -> str:
    return "[" + ", ".join(str(b) for b in data) + "]"


def parse_byte_array(text: str) -> bytes:
    """
    Parse a wallet-file style byte array such as ``[1, 2, 3]``.

    Brackets are optional and surrounding whitespace is ignored.
    """
    body = text.strip()
    if body.startswith("[") and body.endswith("]"):
        body = body[1:-1].strip()
    if not body:
        return b""

    values = []
    for part in body.split(","):
        part = part.strip()
        if not (part.isascii() and part.isdigit()):
            raise ValueError(f"Not a byte value: {part!r}")
        value = int(part)
        if not 0 <= value <= 255:
            raise ValueError(f"Byte value out of range: {value}")
        values.append(value)
    return bytes(values)
