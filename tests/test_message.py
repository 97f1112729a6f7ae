"""Tests for webhook messages and their serialized form."""

import json

import pytest

from gangway import Color, Embed, WebhookMessage, WebhookValidationError
from gangway.utils import filter_dict, to_json


def _roundtrip(message: WebhookMessage):
    return json.loads(to_json(message.to_dict()))


class TestSerialization:
    def test_content_only(self):
        message = WebhookMessage(content="hello")
        assert to_json(message.to_dict()) == '{"content":"hello","tts":false}'

    def test_no_embeds_key_without_embeds(self):
        data = _roundtrip(WebhookMessage().set_content("hi"))
        assert data["content"] == "hi"
        assert "embeds" not in data

    def test_tts_always_present(self):
        data = _roundtrip(WebhookMessage(embeds=[Embed(title="T")]))
        assert data["tts"] is False
        assert set(data) == {"tts", "embeds"}

    def test_overrides(self):
        message = (
            WebhookMessage()
            .set_content("hi")
            .set_username("bot")
            .set_avatar_url("https://example.com/a.png")
            .set_tts(True)
        )
        assert _roundtrip(message) == {
            "content": "hi",
            "username": "bot",
            "avatar_url": "https://example.com/a.png",
            "tts": True,
        }

    def test_single_embed_scenario(self):
        embed = Embed(title="T", color=Color(0, 255, 0))
        embed.add_field(name="n", value="v", inline=True)

        data = _roundtrip(WebhookMessage().add_embed(embed))
        assert len(data["embeds"]) == 1
        assert data["embeds"][0] == {
            "title": "T",
            "color": 65280,
            "fields": [{"name": "n", "value": "v", "inline": True}],
        }

    def test_embed_order_is_kept(self):
        message = WebhookMessage()
        for title in ("first", "second", "third"):
            message.add_embed(Embed(title=title))

        assert [e["title"] for e in _roundtrip(message)["embeds"]] == [
            "first",
            "second",
            "third",
        ]

    def test_no_null_values(self):
        message = WebhookMessage(content="hi", embeds=[Embed().set_footer("f")])
        assert "null" not in to_json(message.to_dict())

    def test_special_characters_are_escaped(self):
        text = 'say "hi" \\ then\nnewline\ttab é \U0001f600'
        embed = Embed(title=text).add_field(name=text, value=text)

        data = _roundtrip(WebhookMessage(content=text, embeds=[embed]))
        assert data["content"] == text
        assert data["embeds"][0]["title"] == text
        assert data["embeds"][0]["fields"][0]["value"] == text

    def test_more_than_ten_embeds_are_kept(self):
        message = WebhookMessage(embeds=[Embed(title=str(i)) for i in range(12)])
        assert len(message.to_dict()["embeds"]) == 12


class TestValidation:
    def test_empty_message_is_rejected(self):
        with pytest.raises(WebhookValidationError):
            WebhookMessage().validate()

    def test_empty_content_is_rejected(self):
        with pytest.raises(WebhookValidationError):
            WebhookMessage(content="").validate()

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            WebhookMessage().validate()

    def test_content_is_enough(self):
        WebhookMessage(content="hi").validate()

    def test_embed_is_enough(self):
        WebhookMessage().add_embed(Embed()).validate()

    def test_setters_do_not_validate(self):
        message = WebhookMessage(content="hi").set_content(None)
        assert message.content is None


class TestUtils:
    def test_filter_dict_keeps_falsy_values(self):
        assert filter_dict({"a": None, "b": False, "c": 0, "d": "", "e": []}) == {
            "b": False,
            "c": 0,
            "d": "",
            "e": [],
        }

    def test_to_json_is_compact(self):
        assert to_json({"a": [1, 2], "b": {"c": True}}) == '{"a":[1,2],"b":{"c":true}}'
