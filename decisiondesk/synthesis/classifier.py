import logging

import anthropic

from ..models.briefing import BusinessCategory
from .prompts import (
    CLASSIFICATION_SCHEMA,
    CLASSIFICATION_TOOL,
    SYSTEM_PROMPT,
    build_classification_prompt,
)

log = logging.getLogger("decisiondesk.synthesis.classifier")


def classify_business(client: anthropic.Anthropic, raw_text: str, model: str) -> BusinessCategory:
    """Ask the model for a business category, falling back to OTHER on any failure."""
    if not raw_text or not raw_text.strip():
        return BusinessCategory.OTHER

    try:
        message = client.messages.create(
            model=model,
            max_tokens=100,
            system=SYSTEM_PROMPT,
            tools=[{
                "name": CLASSIFICATION_TOOL,
                "description": "Record the business category of the user's data.",
                "input_schema": CLASSIFICATION_SCHEMA,
            }],
            tool_choice={"type": "tool", "name": CLASSIFICATION_TOOL},
            messages=[{"role": "user", "content": build_classification_prompt(raw_text)}],
        )
    except Exception as e:
        log.warning("Classification failed, using Other: %s", e)
        return BusinessCategory.OTHER

    for block in message.content:
        if getattr(block, "type", None) != "tool_use":
            continue
        value = block.input.get("businessType") if isinstance(block.input, dict) else None
        category = BusinessCategory.parse(value)
        if category is BusinessCategory.OTHER and value != BusinessCategory.OTHER.value:
            log.warning("Unrecognized business type %r, using Other", value)
        log.info("Classified business as %s", category.value)
        return category

    log.warning("Classification response had no tool call, using Other")
    return BusinessCategory.OTHER
