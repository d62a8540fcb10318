import locale
from datetime import datetime

from superhuman_fm.rendering.notification import (
    NO_CHANNELS_TEXT,
    PODCAST_HEADER,
    compose_podcast_message,
    compose_settings_confirmation,
    compose_settings_failure,
    format_generated_at,
)
from superhuman_fm.schemas.preferences import ChannelSummary

GENERATED_AT = datetime(2026, 10, 19, 9, 30, 15)


def _section_texts(message):
    return [b["text"]["text"] for b in message["blocks"] if b["type"] == "section"]


def _summaries(*names):
    return [ChannelSummary(id=f"C{i}", display_name=name) for i, name in enumerate(names)]


def test_podcast_message_layout():
    """
    WHY: The podcast DM must carry header, greeting, channels, body and timestamp.
    HOW: Compose for two resolved channels at a fixed time.
    EXPECTED: Block types in order and each text where it belongs.
    """
    message = compose_podcast_message("U1", _summaries("#all-eng", "#all-design"), GENERATED_AT)

    assert [b["type"] for b in message["blocks"]] == [
        "header", "section", "divider", "section", "section", "divider", "context",
    ]
    assert message["blocks"][0]["text"]["text"] == PODCAST_HEADER
    assert message["text"] == "🎙️ Your Superhuman FM podcast is ready!"

    greeting, monitoring, body = _section_texts(message)
    assert "Hey <@U1>!" in greeting
    assert "Monitoring 2 channel(s)" in monitoring
    assert monitoring.endswith("#all-eng, #all-design")
    assert "placeholder" in body

    context = message["blocks"][-1]["elements"][0]["text"]
    assert context == format_generated_at(GENERATED_AT)


def test_empty_selection_says_no_channels():
    message = compose_podcast_message("U1", [], GENERATED_AT)
    monitoring = _section_texts(message)[1]
    assert "Monitoring 0 channel(s)" in monitoring
    assert "No channels selected" in monitoring
    assert monitoring.endswith(NO_CHANNELS_TEXT)


def test_fallback_labels_are_listed_as_is():
    channels = [
        ChannelSummary(id="C1", display_name="#all-eng"),
        ChannelSummary(id="C2", display_name="<#C2>", resolved=False, error="channel_not_found"),
    ]
    monitoring = _section_texts(compose_podcast_message("U1", channels, GENERATED_AT))[1]
    assert monitoring.endswith("#all-eng, <#C2>")


def test_generated_at_uses_locale_date_and_time():
    text = format_generated_at(GENERATED_AT)
    assert text == f"📅 Generated on {GENERATED_AT.strftime('%x')} at {GENERATED_AT.strftime('%X')}"


def test_composition_is_deterministic():
    channels = _summaries("#a")
    assert compose_podcast_message("U1", channels, GENERATED_AT) == compose_podcast_message("U1", channels, GENERATED_AT)


def test_settings_confirmation():
    assert compose_settings_confirmation(_summaries("#all-eng")) == {
        "text": "✅ *Settings saved!*\n\n📢 *Channels:* #all-eng"
    }
    assert compose_settings_confirmation([])["text"].endswith("None selected")


def test_settings_failure_has_text():
    assert "could not be saved" in compose_settings_failure()["text"]


def test_use_system_locale_sets_time_locale():
    from unittest.mock import patch
    from superhuman_fm.rendering.notification import use_system_locale

    with patch("superhuman_fm.rendering.notification.locale.setlocale") as mock_setlocale:
        assert use_system_locale() is True
    mock_setlocale.assert_called_once_with(locale.LC_TIME, "")


def test_use_system_locale_tolerates_unknown_locale():
    """
    WHY: A host with a broken LANG must still start; timestamps then use the C locale.
    HOW: Make setlocale raise locale.Error.
    EXPECTED: No exception, returns False.
    """
    from unittest.mock import patch
    from superhuman_fm.rendering.notification import use_system_locale

    with patch("superhuman_fm.rendering.notification.locale.setlocale", side_effect=locale.Error("unsupported locale setting")):
        assert use_system_locale() is False
