from datetime import datetime
from typing import Iterable, Optional

from ..memory.history import filter_recent
from ..models.briefing import BusinessCategory, HistoryEntry, Tone

NO_DATA_SENTINEL = "No data provided today."
NO_HISTORY_SENTINEL = "No data from the last 7 days."

SYSTEM_PROMPT = """You are DecisionDesk, an AI business strategist and daily advisor for busy entrepreneurs. You turn raw daily business numbers into short, decisive morning briefings."""

TONE_INSTRUCTIONS = {
    Tone.STRATEGIC: (
        "Write like a sharp strategy consultant. Frame every point in terms of long-term "
        "positioning, compounding advantages and where the business should be in 6-12 months. "
        "Be analytical, measured and forward-looking."
    ),
    Tone.TOUGH_LOVE: (
        "Write like a direct, no-nonsense coach. Call out weak spots bluntly, skip the "
        "sugar-coating and push the entrepreneur to act today. Be demanding but fair."
    ),
    Tone.CHILL: (
        "Write like a calm, experienced mentor. Keep it relaxed, reassuring and human, "
        "focusing on steady progress rather than pressure. Be warm and encouraging."
    ),
}

CLASSIFICATION_TOOL = "record_business_type"

CLASSIFICATION_SCHEMA = {
    "type": "object",
    "properties": {
        "businessType": {
            "type": "string",
            "enum": [c.value for c in BusinessCategory],
            "description": "The single category that best describes the business.",
        },
    },
    "required": ["businessType"],
}


def tone_instruction(tone) -> str:
    return TONE_INSTRUCTIONS.get(Tone.parse(tone), TONE_INSTRUCTIONS[Tone.CHILL])


def format_history(history: Iterable[HistoryEntry], now: Optional[datetime] = None) -> str:
    """Render the trailing window oldest-first for trend narration."""
    recent = filter_recent(history, now)
    if not recent:
        return NO_HISTORY_SENTINEL

    records = []
    for entry in reversed(recent):
        date = entry.recorded_at.astimezone().strftime("%x")
        records.append(f"Date: {date}\nData: {entry.raw_text}")
    return "\n".join(records)


def build_briefing_prompt(raw_text: str, tone=Tone.CHILL,
                          history: Iterable[HistoryEntry] = (),
                          now: Optional[datetime] = None) -> str:
    user_data = raw_text if raw_text and raw_text.strip() else NO_DATA_SENTINEL
    historical_data = format_history(history, now)

    return f"""You are DecisionDesk, an AI business strategist and daily advisor for busy entrepreneurs.
Your job is to turn the user's input data into a concise, insight-rich morning business briefing that helps them decide what to focus on today.

Compare today's data with the historical data from the last 7 days below. Point out trends, streaks, improvements or declines, and let them shape your advice. If there is no history, focus on today alone.

Historical Data (oldest first):
{historical_data}

Use the exact emoji prefixes and heading format below. Each section must start on a new line.

🧭 **Daily Overview** — One short paragraph summarizing key performance highlights and what they mean for the business today. Focus on insight, not restating data.

⚠️ **What Needs Attention** — Identify one issue, risk area, or weak signal that could impact progress. Explain it briefly.

💡 **Smart Moves for Today** — Give 2-3 specific, actionable recommendations to grow revenue, improve efficiency, or strengthen the brand. Start each recommendation on a new line with "• ".

🔥 **Decision of the Day** — One single prioritized decision the entrepreneur should make today. Be decisive and persuasive.

💭 **CEO Thought** — End with a short motivational quote or personalized encouragement line that fits the tone of the report.

Writing Style Guidelines:
- Max 300 words total.
- {tone_instruction(tone)}
- Avoid generic business jargon; use natural language and fresh phrasing.
- Always interpret what the data means, don't just restate what it says.
- DO NOT output explanations of your reasoning or any commentary about these instructions. Just give the formatted briefing.

If the user provides "{NO_DATA_SENTINEL}", give a short default productivity tip and encouragement in the same format. For "Smart Moves", suggest a generic productivity tip. For "Decision of the Day", suggest a small, manageable task.

Business Data:
{user_data}"""


def build_classification_prompt(raw_text: str) -> str:
    categories = ", ".join(c.value for c in BusinessCategory)
    return f"""Classify the business described by the data below into exactly one of these categories: {categories}.

Pick "Other" if none fits. Respond only by calling the {CLASSIFICATION_TOOL} tool.

Business Data:
{raw_text}"""
