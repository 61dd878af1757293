"""Perplexity chat completion schema and response records."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from flashlib.core.models import ActionParameters, ProviderRecord

PerplexityModel = Literal[
    "sonar",
    "sonar-small-chat",
    "sonar-small-online",
    "sonar-medium-chat",
    "sonar-medium-online",
    "mixtral-8x7b-instruct",
    "mistral-7b-instruct",
    "codellama-34b-instruct",
]


class ChatMessage(ActionParameters):
    role: Literal["system", "user", "assistant"]
    content: str


class ResponseFormat(ActionParameters):
    type: Optional[Literal["json", "text"]] = None
    schema_: Optional[Dict[str, Any]] = Field(default=None, alias="schema")


class PerplexityChatParams(ActionParameters):
    model: PerplexityModel = Field(default="sonar", description="The model to use for chat completions")
    messages: List[ChatMessage] = Field(..., min_length=1, description="The list of messages in the conversation")
    max_tokens: Optional[int] = Field(default=None, gt=0, description="Maximum number of tokens to generate")
    temperature: float = Field(default=0.2, ge=0, le=1.99, description="Sampling temperature (0-1.99)")
    top_p: float = Field(default=0.9, ge=0, le=1, description="Nucleus sampling threshold (0-1)")
    search_domain_filter: Optional[List[str]] = Field(
        default=None, max_length=3, description="Limit citations to URLs from specified domains (max 3)"
    )
    return_images: bool = Field(default=False, description="Whether to return images in the response")
    return_related_questions: bool = Field(default=False, description="Whether to return related questions")
    search_recency_filter: Optional[Literal["month", "week", "day", "hour"]] = Field(
        default=None, description="Time filter for search results"
    )
    top_k: int = Field(default=0, ge=0, le=2048, description="Top-k filtering (0-2048); 0 disables it")
    presence_penalty: float = Field(default=0, ge=-2, le=2, description="Penalty for token presence (-2 to 2)")
    frequency_penalty: float = Field(default=1, gt=0, description="Penalty for token frequency, greater than 0")
    response_format: Optional[ResponseFormat] = Field(default=None, description="Structured output format")


class ChoiceMessage(ProviderRecord):
    content: Optional[str] = None


class Choice(ProviderRecord):
    message: Optional[ChoiceMessage] = None
    finish_reason: Optional[str] = None


class ChatCompletion(ProviderRecord):
    model: Optional[str] = None
    created: Optional[int] = None
    choices: List[Choice] = Field(default_factory=list)
    citations: List[str] = Field(default_factory=list)
    related_questions: List[str] = Field(default_factory=list)
