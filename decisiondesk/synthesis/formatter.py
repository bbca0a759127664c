import html
import re

from ..models.briefing import BriefingResult, BriefingSection, BusinessCategory

SECTION_MARKERS = ("🧭", "⚠️", "💡", "🔥", "💭")

# Split before each marker, keeping the marker on the following chunk.
# Variant encodings of a marker (e.g. ⚠ without U+FE0F) do not match and the
# section merges into the previous one.
_SECTION_SPLIT = re.compile("(?=" + "|".join(re.escape(m) for m in SECTION_MARKERS) + ")")
_WHITESPACE = re.compile(r"\s")

CATEGORY_THEMES = {
    BusinessCategory.COFFEE: {"accent": "#b45309", "icon": "☕"},
    BusinessCategory.RESTAURANT: {"accent": "#dc2626", "icon": "🍽️"},
    BusinessCategory.GYM: {"accent": "#16a34a", "icon": "🏋️"},
    BusinessCategory.FASHION: {"accent": "#db2777", "icon": "👗"},
    BusinessCategory.TECH: {"accent": "#2563eb", "icon": "💻"},
    BusinessCategory.MARKETING: {"accent": "#ea580c", "icon": "📣"},
    BusinessCategory.REAL_ESTATE: {"accent": "#0d9488", "icon": "🏠"},
    BusinessCategory.EDUCATION: {"accent": "#7c3aed", "icon": "🎓"},
    BusinessCategory.TRAVEL: {"accent": "#0284c7", "icon": "✈️"},
    BusinessCategory.MUSIC: {"accent": "#c026d3", "icon": "🎵"},
    BusinessCategory.OTHER: {"accent": "#6366f1", "icon": "📊"},
}


def segment_briefing(text: str) -> list[BriefingSection]:
    """Split a model reply into titled sections on the emoji headers.

    Never raises. A chunk that does not open with a recognized marker, or has
    no whitespace after its marker, becomes a degenerate section (no emoji, no
    title) holding the whole chunk.
    """
    if not text:
        return []

    sections = []
    for chunk in _SECTION_SPLIT.split(text):
        chunk = chunk.strip()
        if not chunk:
            continue

        space = _WHITESPACE.search(chunk)
        if space is None or not chunk.startswith(SECTION_MARKERS):
            sections.append(BriefingSection(emoji="", title="", body=chunk))
            continue

        emoji = chunk[:space.start()]
        rest = chunk[space.start() + 1:].replace("**", "")
        dash = rest.find("—")
        if dash == -1:
            sections.append(BriefingSection(emoji=emoji, title=rest, body=""))
            continue

        sections.append(BriefingSection(
            emoji=emoji,
            title=rest[:dash].strip(),
            body=rest[dash + 1:].strip(),
        ))

    return sections


def render_body_html(body: str) -> str:
    """Escape the body, then turn bullets into list items and newlines into breaks."""
    escaped = html.escape(body, quote=True)
    return escaped.replace("•", "<li>").replace("\n", "<br />")


def theme_for(category: BusinessCategory) -> dict:
    return CATEGORY_THEMES.get(category, CATEGORY_THEMES[BusinessCategory.OTHER])


def render_html(result: BriefingResult) -> str:
    theme = theme_for(result.business_type)
    lines = [
        f'<div class="briefing" data-business-type="{html.escape(result.business_type.value)}" '
        f'style="border-color: {theme["accent"]}">',
        f'  <h2>{theme["icon"]} Your Daily Focus</h2>',
    ]
    for section in result.sections:
        lines.append('  <div class="briefing-section">')
        lines.append(f'    <span class="emoji">{html.escape(section.emoji)}</span>')
        lines.append(f'    <h3 style="color: {theme["accent"]}">{html.escape(section.title)}</h3>')
        lines.append(f'    <div class="content">{render_body_html(section.body)}</div>')
        lines.append("  </div>")
    lines.append("</div>")
    return "\n".join(lines)


def render_text(result: BriefingResult) -> str:
    theme = theme_for(result.business_type)
    lines = [f"{theme['icon']} YOUR DAILY FOCUS ({result.business_type.value})", "=" * 40]

    for section in result.sections:
        if section.is_degenerate:
            lines.append(f"\n{section.body}")
            continue
        lines.append(f"\n{section.emoji} {section.title.upper()}".rstrip())
        if section.body:
            lines.append(section.body)

    return "\n".join(lines)
