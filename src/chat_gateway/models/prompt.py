"""
Helpers for assembling the simulated-agent system prompt.

The gateway treats the system prompt as opaque text; callers use
``build_system_prompt`` to fold extracted document text into it before
constructing a request.
"""

from typing import Iterable

from pydantic import BaseModel

PROMPT_HEADER = (
    "You are simulating an agent system based on the following "
    "design specifications:\n\n"
)

PROMPT_FOOTER = (
    "\nRespond as this designed system would, following all specifications exactly. "
    "If the specifications define states, mention which state you're in. "
    "If they define error conditions, handle them as specified. "
    "Stay in character as the designed agent system."
)


class SourceDocument(BaseModel):
    """Plain text of an uploaded document."""
    name: str
    type: str
    content: str


def build_system_prompt(documents: Iterable[SourceDocument]) -> str:
    """
    Build the system prompt from a sequence of documents.

    Args:
        documents: Documents in the order they should appear

    Returns:
        Prompt text with one section per document
    """
    prompt = PROMPT_HEADER
    for doc in documents:
        prompt += f"\n=== {doc.name} ({doc.type}) ===\n"
        prompt += doc.content
        prompt += "\n\n"
    return prompt + PROMPT_FOOTER
