from __future__ import annotations

from typing import Any

from openai import APIConnectionError, APIError, APIStatusError, OpenAI

from rsa_ops.models import GROQ_BASE_URL


class CompletionError(Exception):
    """A single completion request failed; the batch carries on."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _response_to_dict(response: Any) -> dict[str, Any]:
    if hasattr(response, "model_dump"):
        return response.model_dump()
    if hasattr(response, "dict"):
        return response.dict()
    if isinstance(response, dict):
        return response
    return {"raw": str(response)}


def _error_message(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if error is None or error == {} or error == "":
        return None
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
        return str(error)
    return str(error)


def _format_error_reason(message: str, status_code: int | None) -> str:
    if status_code is not None:
        return f"{status_code}: {message}"
    return message


def _extract_content(payload: dict[str, Any]) -> str:
    choices = payload.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else ""


class CompletionClient:
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = GROQ_BASE_URL,
        client: Any | None = None,
    ) -> None:
        # no retries: a failed record is skipped, not re-sent
        self._client = client or OpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        self.last_payload: dict[str, Any] | None = None

    def complete(self, request: dict[str, Any]) -> str:
        self.last_payload = None
        try:
            response = self._client.chat.completions.create(**request)
        except APIStatusError as err:
            body = err.body if isinstance(err.body, dict) else None
            # the SDK hands over the contents of the "error" key as the body
            if body is not None and "error" not in body:
                body = {"error": body}
            self.last_payload = body
            message = _error_message(body) or err.message
            raise CompletionError(
                f"Groq API Error: {_format_error_reason(message, err.status_code)}",
                status_code=err.status_code,
            ) from err
        except APIConnectionError as err:
            raise CompletionError(f"Groq API connection error: {err}") from err
        except APIError as err:
            raise CompletionError(f"Groq API Error: {err.message}") from err

        payload = _response_to_dict(response)
        self.last_payload = payload
        message = _error_message(payload)
        if message is not None:
            raise CompletionError(f"Groq API Error: {message}")
        return _extract_content(payload)
