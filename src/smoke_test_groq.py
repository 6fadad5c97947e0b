from pathlib import Path
import os

from dotenv import load_dotenv
from openai import OpenAI

from rsa_ops.models import GROQ_BASE_URL, GroqModel


def main() -> None:
    # Always load .env from repo root
    root = Path(__file__).resolve().parents[1]
    load_dotenv(root / ".env", override=True)

    model = os.getenv("GROQ_MODEL", GroqModel.LLAMA_31_8B_INSTANT.value)

    client = OpenAI(
        api_key=os.environ["GROQ_API_KEY"],
        base_url=os.getenv("GROQ_BASE_URL", GROQ_BASE_URL),
        max_retries=0,
    )
    resp = client.chat.completions.create(
        model=model,
        messages=[{"role": "user", "content": "Reply with exactly: OK"}],
        max_tokens=5,
    )

    print(resp.choices[0].message.content)


if __name__ == "__main__":
    main()
