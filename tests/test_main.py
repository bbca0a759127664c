"""Tests for the command-line entry point and webhook delivery."""

from unittest.mock import MagicMock, patch

import httpx

from decisiondesk import main as cli
from decisiondesk.delivery.webhook import send_briefing
from decisiondesk.errors import GenerationError, ValidationError
from decisiondesk.models.briefing import BriefingResult, BriefingSection, BusinessCategory, Tone

RESULT = BriefingResult(
    text="🧭 **Daily Overview** — Fine.",
    sections=[BriefingSection(emoji="🧭", title="Daily Overview", body="Fine.")],
    business_type=BusinessCategory.GYM,
)


class TestRunOnce:
    def test_success_prints_briefing(self, capsys):
        engine = MagicMock()
        engine.submit.return_value = RESULT

        with patch.object(cli.config, "DRY_RUN", True):
            status = cli.run_once(engine, "Sales: $500", Tone.STRATEGIC)

        assert status == 0
        assert "DAILY OVERVIEW" in capsys.readouterr().out
        engine.submit.assert_called_once_with("Sales: $500", Tone.STRATEGIC, has_briefing=False)

    def test_generation_error_message(self, capsys):
        engine = MagicMock()
        engine.submit.side_effect = GenerationError("The AI service is currently unavailable.")

        status = cli.run_once(engine, "Sales: $500", Tone.CHILL)

        assert status == 1
        assert "Failed to generate briefing. The AI service is currently unavailable." in capsys.readouterr().err

    def test_validation_error(self, capsys):
        engine = MagicMock()
        engine.submit.side_effect = ValidationError("Please enter your business data.")

        status = cli.run_once(engine, "", Tone.CHILL, has_briefing=True)

        assert status == 2
        assert "Please enter your business data." in capsys.readouterr().err

    def test_writes_html(self, tmp_path):
        engine = MagicMock()
        engine.submit.return_value = RESULT
        out = tmp_path / "out" / "briefing.html"

        with patch.object(cli.config, "DRY_RUN", True):
            cli.run_once(engine, "Sales: $500", Tone.CHILL, html_path=str(out))

        assert 'data-business-type="Gym"' in out.read_text(encoding="utf-8")

    def test_delivers_to_webhook(self):
        engine = MagicMock()
        engine.submit.return_value = RESULT

        with patch.object(cli.config, "DRY_RUN", False), \
                patch.object(cli.config, "WEBHOOK_URL", "https://hooks.example.com/briefing"), \
                patch.object(cli, "send_briefing") as send:
            cli.run_once(engine, "Sales: $500", Tone.CHILL)

        send.assert_called_once()


class TestInteractive:
    def test_empty_line_after_briefing_is_rejected(self, capsys):
        engine = MagicMock()

        def submit(raw_text, tone, has_briefing=False):
            if not raw_text.strip() and has_briefing:
                raise ValidationError("Please enter your business data.")
            return RESULT

        engine.submit.side_effect = submit

        with patch("builtins.input", side_effect=["", "", EOFError()]), \
                patch.object(cli.config, "DRY_RUN", True):
            status = cli.run_interactive(engine, Tone.CHILL)

        assert status == 2
        calls = engine.submit.call_args_list
        assert calls[0].kwargs == {"has_briefing": False}
        assert calls[1].kwargs == {"has_briefing": True}
        assert "Please enter your business data." in capsys.readouterr().err


class TestArgs:
    def test_defaults(self):
        args = cli.parse_args(["Sales: $500"])

        assert args.text == "Sales: $500"
        assert args.tone == cli.config.DEFAULT_TONE
        assert not args.interactive

    def test_read_from_file(self, tmp_path):
        data = tmp_path / "today.txt"
        data.write_text("Sales: $900", encoding="utf-8")

        args = cli.parse_args(["--file", str(data), "--tone", "Tough Love"])

        assert cli.read_input(args) == "Sales: $900"
        assert Tone.parse(args.tone) is Tone.TOUGH_LOVE


class TestWebhook:
    def test_posts_payload(self):
        response = httpx.Response(200, request=httpx.Request("POST", "https://hooks.example.com"))
        with patch("decisiondesk.delivery.webhook.httpx.post", return_value=response) as post:
            ok = send_briefing("<div/>", "text", url="https://hooks.example.com", api_key="secret")

        assert ok is True
        kwargs = post.call_args.kwargs
        assert kwargs["json"] == {"html": "<div/>", "text": "text"}
        assert kwargs["headers"]["X-API-Key"] == "secret"

    def test_http_error_returns_false(self):
        with patch("decisiondesk.delivery.webhook.httpx.post", side_effect=httpx.ConnectError("down")):
            assert send_briefing("<div/>", "text", url="https://hooks.example.com") is False

    def test_no_url_skips(self):
        with patch.object(cli.config, "WEBHOOK_URL", ""), \
                patch("decisiondesk.delivery.webhook.httpx.post") as post:
            assert send_briefing("<div/>", "text") is False
        post.assert_not_called()
