"""Pydantic models for FinFlow AI completions."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finflow_ai.exceptions import EmptyCompletionError


class ChatMessage(BaseModel):
    """Input message for a completion request."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant", "system"] = Field(..., description="Message role")
    content: str = Field(..., description="Message text")


class CompletionRequest(BaseModel):
    """Chat completion request. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    model: str = Field(..., min_length=1, description="OpenRouter model identifier")
    messages: tuple[ChatMessage, ...] = Field(..., min_length=1)
    stream: bool = False

    @classmethod
    def from_prompt(
        cls,
        prompt: str,
        model: str,
        system_prompt: str | None = None,
    ) -> "CompletionRequest":
        """Create a request with a single user message.

        Args:
            prompt: User message text.
            model: Model identifier.
            system_prompt: Optional system message placed before the prompt.

        Returns:
            Non-streaming CompletionRequest.
        """
        messages = []
        if system_prompt:
            messages.append(ChatMessage(role="system", content=system_prompt))
        messages.append(ChatMessage(role="user", content=prompt))
        return cls(model=model, messages=tuple(messages), stream=False)

    def to_payload(self) -> dict[str, Any]:
        """Keyword arguments for the chat completions endpoint."""
        return {
            "model": self.model,
            "messages": [message.model_dump() for message in self.messages],
            "stream": self.stream,
        }


class UsageInfo(BaseModel):
    """Token usage information."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChoiceMessage(BaseModel):
    """Message returned inside a choice."""

    model_config = ConfigDict(extra="ignore")

    role: str = "assistant"
    content: str | None = None


class Choice(BaseModel):
    """One candidate response."""

    model_config = ConfigDict(extra="ignore")

    index: int = 0
    message: ChoiceMessage
    finish_reason: str | None = None


class Completion(BaseModel):
    """Chat completion response.

    Only the fields FinFlow reads are modeled; anything else OpenRouter
    returns (provider, system_fingerprint, ...) is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    model: str | None = None
    choices: list[Choice] = Field(default_factory=list)
    usage: UsageInfo | None = None

    @field_validator("choices", mode="before")
    @classmethod
    def _null_choices(cls, value: Any) -> Any:
        return [] if value is None else value

    def first_content(self) -> str:
        """Return the text of the first choice.

        Raises:
            EmptyCompletionError: If there is no choice or it has no text.
        """
        if not self.choices:
            raise EmptyCompletionError("No completion returned: response has no choices")
        content = self.choices[0].message.content
        if content is None:
            raise EmptyCompletionError("No completion returned: first choice has no content")
        return content
