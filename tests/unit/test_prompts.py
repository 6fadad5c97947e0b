from __future__ import annotations

from rsa_ops.models import AssetRecord, GroqModel
from rsa_ops.prompts import build_prompt, build_request, max_length_for


def test_headline_bound_is_case_insensitive() -> None:
    assert max_length_for("Headline") == 30
    assert max_length_for("HEADLINE") == 30
    assert max_length_for(" headline ") == 30


def test_other_types_use_long_bound() -> None:
    assert max_length_for("Description") == 90
    assert max_length_for("Long headline") == 90
    assert max_length_for("") == 90
    assert max_length_for(None) == 90


def test_prompt_mentions_text_bound_and_rules() -> None:
    record = AssetRecord(asset_type="Headline", asset_text="Buy now")
    prompt = build_prompt(record)
    assert 'Generate 3 alternative headlines for the following text: "Buy now".' in prompt
    assert "under 30 characters" in prompt
    assert "Do not include numbering or bullet points" in prompt
    assert "same language" in prompt


def test_description_prompt_uses_long_bound() -> None:
    record = AssetRecord(asset_type="Description", asset_text="Free shipping on all orders")
    prompt = build_prompt(record)
    assert "alternative descriptions" in prompt
    assert "under 90 characters" in prompt


def test_build_request_payload() -> None:
    record = AssetRecord(asset_type="Headline", asset_text="Buy now")
    request = build_request(record, GroqModel.LLAMA3_8B_8192)
    assert request["model"] == "llama3-8b-8192"
    assert request["max_tokens"] == 150
    assert request["temperature"] == 0.7
    assert request["messages"] == [{"role": "user", "content": build_prompt(record)}]
