import logging

import httpx

from .. import config

log = logging.getLogger("decisiondesk.delivery")


def send_briefing(html: str, text: str, url: str = "", api_key: str = "") -> bool:
    """Post a rendered briefing to the configured webhook."""
    url = url or config.WEBHOOK_URL
    api_key = api_key or config.WEBHOOK_API_KEY
    if not url:
        log.info("No webhook configured, skipping delivery")
        return False

    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["X-API-Key"] = api_key

    payload = {
        "html": html,
        "text": text,
    }

    try:
        resp = httpx.post(url, json=payload, headers=headers, timeout=30)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        log.error("Failed to deliver briefing: %s", e)
        return False

    log.info("Briefing delivered to %s", url)
    return True
