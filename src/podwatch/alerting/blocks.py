"""
Podwatch - Slack Block Kit Builders
"""

from typing import Any, Dict, List

from podwatch.core.constants import CHUNK_SIZE


def chunks(text: str, size: int = CHUNK_SIZE) -> List[str]:
    """
    Split text into consecutive pieces of at most `size` characters.

    Joining the result gives back the input. Slicing works on code points,
    so multi-byte characters are never cut in half.

    Args:
        text: The text to split
        size: Maximum characters per piece

    Returns:
        List of pieces; a single piece when text fits
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")

    if len(text) <= size:
        return [text]

    return [text[start:start + size] for start in range(0, len(text), size)]


def markdown_text(text: str) -> Dict[str, Any]:
    return {"type": "mrkdwn", "text": text, "verbatim": True}


def plain_section(text: str) -> Dict[str, Any]:
    return {
        "type": "section",
        "text": {"type": "plain_text", "text": text, "emoji": True},
    }


def markdown_section(text: str) -> Dict[str, Any]:
    return {"type": "section", "text": markdown_text(text)}


def fields_section(fields: Dict[str, str]) -> Dict[str, Any]:
    """Build a section showing labelled values side by side."""
    return {
        "type": "section",
        "fields": [
            markdown_text(f"*{label}*\n{value}") for label, value in fields.items()
        ],
    }


def code_sections(header: str, body: str) -> List[Dict[str, Any]]:
    """
    Build a header section followed by one code block per chunk of body.

    Returns an empty list when body is blank.
    """
    body = body.strip()
    if not body:
        return []

    blocks = [markdown_section(header)]
    for chunk in chunks(body):
        blocks.append(markdown_section(f"```{chunk}```"))
    return blocks
