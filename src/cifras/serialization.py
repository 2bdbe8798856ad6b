"""Token serialization: JSON round-trip for scanned token lists.

Converts tokens to/from JSON-compatible dicts, for handing a scan to a
parser in another process or caching it on disk.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from cifras import tokenize
    from cifras.serialization import to_json, from_json

    tokens = tokenize("1500 + 89")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from cifras.tokens import Token, TokenType


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Args:
        token: A scanned token.

    Returns:
        Dict with type name, lexeme, offsets and source file.

    """
    return {
        "type": token.type.name,
        "value": token.value,
        "offset": token.offset,
        "end_offset": token.end_offset,
        "source_file": token._source_file,
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Args:
        data: Dict with a ``type`` name and token fields.

    Returns:
        Reconstructed Token.

    Raises:
        ValueError: If the type name is not a TokenType member.

    """
    type_name = data.get("type")
    try:
        token_type = TokenType[type_name]  # type: ignore[misc]
    except KeyError:
        raise ValueError(f"Unknown token type: {type_name!r}") from None

    return Token(
        type=token_type,
        value=data["value"],
        _start_offset=data["offset"],
        _end_offset=data["end_offset"],
        _source_file=data.get("source_file"),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON string.

    Args:
        tokens: Tokens in source order.
        indent: JSON indentation (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a JSON string to a token list.

    Args:
        data: JSON string produced by to_json.

    Returns:
        Tokens in the serialized order.

    """
    return [from_dict(item) for item in json.loads(data)]
