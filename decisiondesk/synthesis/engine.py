import logging
from typing import Optional

import anthropic

from .. import config
from ..errors import ConfigurationError, GenerationError, ValidationError
from ..memory.history import HistoryStore
from ..models.briefing import BriefingRequest, BriefingResult, Tone
from ..synthesis.classifier import classify_business
from ..synthesis.formatter import segment_briefing
from ..synthesis.prompts import SYSTEM_PROMPT, build_briefing_prompt

log = logging.getLogger("decisiondesk.synthesis")

MISSING_KEY_MESSAGE = "ANTHROPIC_API_KEY environment variable not set."
UNAVAILABLE_MESSAGE = "The AI service is currently unavailable. Please try again later."
EMPTY_INPUT_MESSAGE = "Please enter your business data."


class SynthesisEngine:
    def __init__(self, history: HistoryStore, api_key: Optional[str] = None,
                 model: str = config.ANTHROPIC_MODEL, max_tokens: int = config.MAX_TOKENS,
                 client: Optional[anthropic.Anthropic] = None):
        self.history = history
        self.api_key = config.ANTHROPIC_API_KEY if api_key is None else api_key
        self.model = model
        self.max_tokens = max_tokens
        self._client = client

    @property
    def client(self) -> anthropic.Anthropic:
        if not self.api_key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)
        if self._client is None:
            self._client = anthropic.Anthropic(api_key=self.api_key)
        return self._client

    def submit(self, raw_text: str, tone=Tone.CHILL, has_briefing: bool = False) -> BriefingResult:
        """Validate a submission, then generate its briefing.

        Empty input is only allowed while no briefing has been shown yet; it
        then asks the model for a default productivity tip.
        """
        if not (raw_text or "").strip() and has_briefing:
            raise ValidationError(EMPTY_INPUT_MESSAGE)
        return self.generate(raw_text, tone)

    def generate(self, raw_text: str, tone=Tone.CHILL) -> BriefingResult:
        """Run classification and briefing generation for one submission."""
        client = self.client
        raw_text = raw_text or ""

        # Step 1: Classify (never fails)
        business_type = classify_business(client, raw_text, self.model)

        # Step 2: Build request from the trailing history window
        request = BriefingRequest(
            raw_text=raw_text,
            tone=Tone.parse(tone),
            history=tuple(self.history.recent()),
        )
        prompt = build_briefing_prompt(request.raw_text, request.tone, request.history)

        log.info(
            "Requesting briefing: %d chars input, tone %s, %d history entries",
            len(raw_text), request.tone.value, len(request.history),
        )

        # Step 3: Call the model
        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            log.error("Error calling Anthropic API: %s", e)
            raise GenerationError(UNAVAILABLE_MESSAGE) from e

        response_text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        log.info("Briefing response: %d chars", len(response_text))

        # Step 4: Segment for display
        sections = segment_briefing(response_text)
        log.info("Segmented briefing into %d sections", len(sections))

        # Step 5: Remember the submission
        self.history.append(raw_text)

        return BriefingResult(text=response_text, sections=sections, business_type=business_type)
