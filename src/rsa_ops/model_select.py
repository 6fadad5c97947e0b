from __future__ import annotations

from rsa_ops.models import GroqModel

INVALID_MODEL_MESSAGE = "Invalid model ID. Please try again."
CANCELED_MESSAGE = "Action canceled."


def available_models() -> list[str]:
    return [model.value for model in GroqModel]


def parse_model(value: str | None) -> GroqModel | None:
    """Return the allow-listed model for `value`, or None when it is not one."""
    if value is None:
        return None
    try:
        return GroqModel(value.strip())
    except ValueError:
        return None


def prompt_str(label: str) -> str | None:
    try:
        return input(f"{label}: ").strip()
    except EOFError:
        return None


def prompt_model() -> GroqModel:
    print("\n=== Select Model ===\n")
    print("Enter the model ID from the following options:")
    for name in available_models():
        print(f"  {name}")
    print()

    answer = prompt_str("Model ID (empty to cancel)")
    if not answer:
        print(CANCELED_MESSAGE)
        raise SystemExit(1)
    model = parse_model(answer)
    if model is None:
        print(INVALID_MODEL_MESSAGE)
        raise SystemExit(2)
    return model
