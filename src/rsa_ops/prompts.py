from __future__ import annotations

from typing import Any

from rsa_ops.models import AssetRecord, GroqModel

HEADLINE_MAX_LENGTH = 30
DEFAULT_MAX_LENGTH = 90
ALTERNATIVES_PER_ASSET = 3


def max_length_for(asset_type: Any) -> int:
    if isinstance(asset_type, str) and asset_type.strip().lower() == "headline":
        return HEADLINE_MAX_LENGTH
    return DEFAULT_MAX_LENGTH


def build_prompt(record: AssetRecord) -> str:
    max_length = max_length_for(record.asset_type)
    asset_kind = (record.asset_type or "asset").strip().lower()
    return (
        f"Generate {ALTERNATIVES_PER_ASSET} alternative {asset_kind}s for the following text: "
        f'"{record.asset_text}".\n'
        "Requirements:\n"
        f"- Each alternative must be under {max_length} characters\n"
        "- Make them engaging and action-oriented\n"
        "- Focus on benefits and unique value propositions\n"
        "- Each must be distinct from the others\n"
        f"- Return exactly {ALTERNATIVES_PER_ASSET} alternatives, one per line\n"
        "- Do not include numbering or bullet points\n"
        "- Do not include any additional text or explanations\n"
        "- Detect the language used, and provide an answer in the same language\n"
        "\n"
        "Example format:\n"
        "First alternative\n"
        "Second alternative\n"
        "Third alternative"
    )


def build_request(
    record: AssetRecord,
    model: GroqModel,
    *,
    max_tokens: int = 150,
    temperature: float = 0.7,
) -> dict[str, Any]:
    return {
        "model": model.value,
        "messages": [{"role": "user", "content": build_prompt(record)}],
        "max_tokens": max_tokens,
        "temperature": temperature,
    }
