"""
Structured data extraction from agent responses.

Agents are prompted to mark their output with bracket tags:

    [ACTION:code_change] update button style
    [COLLABORATE:frontend-agent] implement new CSS

    ## Next Steps
    - first step
    - second step

A tag body runs until the next ``[`` or the end of the text, so a body
cannot contain a literal ``[``. Each extractor returns None when it finds
nothing and never raises on malformed input.
"""

from __future__ import annotations

import re

from kairo_agents.agents.base import ActionItem, ActionType, CollaborationRequest, Priority
from kairo_agents.core.logging import get_logger

logger = get_logger("agents.extraction")

ACTION_PATTERN = re.compile(r"\[ACTION:([^\]]+)\]([^\[]*)")
COLLABORATE_PATTERN = re.compile(r"\[COLLABORATE:([^\]]+)\]([^\[]*)")
NEXT_STEPS_PATTERN = re.compile(r"## Next Steps\n((?:- .+\n?)+)")

_WHITESPACE = re.compile(r"\s+")
_KNOWN_ACTION_TYPES = {member.value: member for member in ActionType}


def normalize_action_type(raw: str) -> ActionType | str:
    """Lower-case the tag type and join words with underscores."""
    normalized = _WHITESPACE.sub("_", raw.strip().lower())
    known = _KNOWN_ACTION_TYPES.get(normalized)
    if known is None:
        logger.debug("Unknown action type: %s", normalized)
        return normalized
    return known


def extract_action_items(text: str) -> tuple[ActionItem, ...] | None:
    """
    Extract ``[ACTION:type]description`` items in source order.

    A tag immediately followed by ``[`` or the end of text has an empty
    body and is skipped, as is a tag whose type is only whitespace.

    Args:
        text: Raw response text

    Returns:
        Tuple of action items, or None if there are none
    """
    items = []
    for match in ACTION_PATTERN.finditer(text):
        if not match.group(2):
            continue
        action_type = normalize_action_type(match.group(1))
        if not action_type:
            logger.debug("Skipping action tag without a type")
            continue
        items.append(ActionItem(type=action_type, description=match.group(2).strip()))
    return tuple(items) or None


def extract_next_steps(text: str) -> tuple[str, ...] | None:
    """
    Extract the ``- `` lines of the first ``## Next Steps`` block.

    Args:
        text: Raw response text

    Returns:
        Tuple of step strings, or None if there is no block
    """
    match = NEXT_STEPS_PATTERN.search(text)
    if match is None:
        return None
    return tuple(
        line[2:].strip() for line in match.group(1).split("\n") if line.startswith("- ")
    )


def extract_collaboration_requests(text: str) -> tuple[CollaborationRequest, ...] | None:
    """
    Extract ``[COLLABORATE:agent-id]context`` requests in source order.

    Priority is always medium; it is never inferred from the text. Tags with
    an empty body or a blank target are skipped.

    Args:
        text: Raw response text

    Returns:
        Tuple of collaboration requests, or None if there are none
    """
    requests = []
    for match in COLLABORATE_PATTERN.finditer(text):
        target = match.group(1).strip()
        if not match.group(2) or not target:
            continue
        requests.append(
            CollaborationRequest(
                target_agent=target,
                context=match.group(2).strip(),
                priority=Priority.MEDIUM,
            )
        )
    return tuple(requests) or None
