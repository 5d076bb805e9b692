import json

import pytest

from chartlines.classifier import classify
from chartlines.exceptions import UnsupportedFormatError
from chartlines.render import HtmlRenderer, JsonRenderer, TextRenderer, get_renderer

CHART = "[Verse]\nC       G\nHello there\n\nAm F"


# ---------------------------------------------------------------------------
# TextRenderer
# ---------------------------------------------------------------------------


def test_text_plain_output():
    out = TextRenderer(color=False).render(classify(CHART))
    assert out == "[VERSE]\nC       G\nHello there\n\nAm F\n"


def test_text_keeps_chord_alignment():
    out = TextRenderer(color=False).render(classify("   C    G\n   Hello there"))
    assert out.splitlines() == ["   C    G", "   Hello there"]


def test_text_color_styles_chords_and_headers():
    out = TextRenderer(color=True).render(classify("[Chorus]\nC G"))
    rows = out.splitlines()
    assert "\x1b[" in rows[0]
    assert "[CHORUS]" in rows[0]
    assert "\x1b[" in rows[1]
    assert "C G" in rows[1]


def test_text_color_leaves_lyrics_plain():
    out = TextRenderer(color=True).render(classify("Hello there"))
    assert out == "Hello there\n"


def test_text_empty_input():
    assert TextRenderer().render([]) == ""


# ---------------------------------------------------------------------------
# HtmlRenderer
# ---------------------------------------------------------------------------


def test_html_wrapper_and_mode():
    out = HtmlRenderer(mode="controller").render(classify(CHART))
    assert out.startswith('<div class="chart chart--controller">')
    assert out.rstrip().endswith("</div>")


def test_html_line_classes_and_ids():
    out = HtmlRenderer().render(classify(CHART))
    assert '<div id="line-0" class="line line--header">[Verse]</div>' in out
    assert 'id="line-1" class="line line--chords" style="white-space: pre">C       G<' in out
    assert 'id="line-2" class="line line--lyrics"' in out
    assert '<div id="line-3" class="line line--empty"></div>' in out


def test_html_escapes_content():
    out = HtmlRenderer().render(classify("Rock & <roll>"))
    assert "Rock &amp; &lt;roll&gt;" in out
    assert "<roll>" not in out


def test_html_rejects_unknown_mode():
    with pytest.raises(ValueError):
        HtmlRenderer(mode="stage")


def test_html_empty_input():
    assert HtmlRenderer().render([]) == ""


# ---------------------------------------------------------------------------
# JsonRenderer
# ---------------------------------------------------------------------------


def test_json_records():
    out = JsonRenderer().render(classify(CHART))
    records = json.loads(out)
    assert records[0] == {"id": "line-0", "kind": "header", "content": "[Verse]"}
    assert records[3] == {"id": "line-3", "kind": "empty", "content": ""}
    assert [r["kind"] for r in records] == ["header", "chords", "lyrics", "empty", "chords"]


def test_json_keeps_unicode():
    out = JsonRenderer(indent=None).render(classify("coração"))
    assert "coração" in out


def test_json_empty_input_is_empty_array():
    out = JsonRenderer().render([])
    assert out == "[]\n"
    assert json.loads(out) == []


# ---------------------------------------------------------------------------
# get_renderer
# ---------------------------------------------------------------------------


def test_get_renderer_by_name():
    assert isinstance(get_renderer("text"), TextRenderer)
    assert isinstance(get_renderer("html", mode="viewer"), HtmlRenderer)
    assert isinstance(get_renderer("json"), JsonRenderer)


def test_get_renderer_passes_options():
    assert get_renderer("text", color=False).color is False


def test_get_renderer_unknown_format():
    with pytest.raises(UnsupportedFormatError):
        get_renderer("pdf")
