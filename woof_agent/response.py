# response.py
# Splits an A2UI reply into its conversational text and its UI payload.

from dataclasses import dataclass
from typing import Optional

A2UI_DELIMITER = "---a2ui---"


@dataclass(frozen=True)
class ParsedResponse:
    conversational_text: str
    structured_payload: Optional[str] = None


def split_response(raw: str) -> ParsedResponse:
    """Split on the first delimiter only; the payload is passed through unparsed."""
    parts = raw.split(A2UI_DELIMITER, 1)
    if len(parts) == 2:
        return ParsedResponse(parts[0].strip(), parts[1].strip())
    return ParsedResponse(raw)
