import argparse
import logging
import os
import sys
from typing import Optional

from . import config
from .delivery.webhook import send_briefing
from .errors import DecisionDeskError, ValidationError
from .memory.history import HistoryStore
from .memory.store import JsonFileStore
from .models.briefing import BriefingResult, Tone
from .synthesis.engine import SynthesisEngine
from .synthesis.formatter import render_html, render_text

log = logging.getLogger("decisiondesk")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="decisiondesk",
        description="Turn today's business numbers into a focused morning briefing.",
    )
    parser.add_argument("text", nargs="?", default=None,
                        help="today's business data, e.g. 'Sales: $4.2k, Ad spend: $150'")
    parser.add_argument("--tone", default=config.DEFAULT_TONE,
                        help="Strategic, Chill or Tough Love (default: %(default)s)")
    parser.add_argument("--file", help="read business data from a file")
    parser.add_argument("--html", help="also write the briefing as HTML to this path")
    parser.add_argument("--interactive", action="store_true",
                        help="keep prompting for data until EOF")
    return parser.parse_args(argv)


def read_input(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            return f.read()
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def publish(result: BriefingResult, html_path: Optional[str] = None):
    """Print the briefing and hand it to any configured outputs."""
    text = render_text(result)
    html = render_html(result)

    print("\n" + text + "\n")

    if html_path:
        os.makedirs(os.path.dirname(os.path.abspath(html_path)), exist_ok=True)
        with open(html_path, "w", encoding="utf-8") as f:
            f.write(html)
        log.info("Wrote HTML briefing to %s", html_path)

    if config.DRY_RUN:
        log.info("DRY RUN - briefing not delivered")
    elif config.WEBHOOK_URL:
        send_briefing(html, text)


def run_once(engine: SynthesisEngine, raw_text: str, tone: Tone,
             has_briefing: bool = False, html_path: Optional[str] = None) -> int:
    try:
        result = engine.submit(raw_text, tone, has_briefing=has_briefing)
    except ValidationError as e:
        print(str(e), file=sys.stderr)
        return 2
    except DecisionDeskError as e:
        log.error("Briefing failed: %s", e)
        print(f"Failed to generate briefing. {e}", file=sys.stderr)
        return 1

    publish(result, html_path)
    return 0


def run_interactive(engine: SynthesisEngine, tone: Tone, html_path: Optional[str] = None) -> int:
    has_briefing = False
    status = 0
    print("Enter today's business data (empty line for a default tip, Ctrl-D to quit).")
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        status = run_once(engine, line, tone, has_briefing, html_path)
        if status == 0:
            has_briefing = True
    return status


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = parse_args(argv)
    tone = Tone.parse(args.tone)

    log.info("=== DecisionDesk ===")
    log.info("Model: %s", config.ANTHROPIC_MODEL)
    log.info("History: %s", config.HISTORY_PATH)
    log.info("Tone: %s", tone.value)
    log.info("Dry run: %s", config.DRY_RUN)

    history = HistoryStore(JsonFileStore(config.HISTORY_PATH))
    engine = SynthesisEngine(history)

    if args.interactive:
        return run_interactive(engine, tone, args.html)
    return run_once(engine, read_input(args), tone, html_path=args.html)


if __name__ == "__main__":
    sys.exit(main())
