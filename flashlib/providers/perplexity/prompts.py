"""Descriptions shown to the model for Perplexity actions."""

PERPLEXITY_CHAT_PROMPT = """
This tool queries the Perplexity API for chat completions. Perplexity answers with
AI-generated text backed by citation sources from the web.

Required inputs:
- messages: Array of message objects with 'role' and 'content' fields. Roles can be "system", "user" or "assistant".

Optional inputs:
- model: The model to use (default: "sonar")
- max_tokens: Maximum tokens to generate
- temperature: Sampling temperature (0-1.99, default: 0.2)
- top_p: Nucleus sampling threshold (0-1, default: 0.9)
- search_domain_filter: Array of domains to limit citations (max 3)
- return_images: Whether to return images (default: false)
- return_related_questions: Whether to return related questions (default: false)
- search_recency_filter: Time filter ("month", "week", "day", "hour")
- top_k: Tokens for top-k filtering (0-2048, default: 0)
- presence_penalty: Penalty for token presence (-2 to 2, default: 0)
- frequency_penalty: Penalty for token frequency (> 0, default: 1)
- response_format: Structured output format

Example usage:
```
{
  "messages": [
    {"role": "system", "content": "Be precise and concise."},
    {"role": "user", "content": "How many stars are there in our galaxy?"}
  ],
  "search_recency_filter": "week"
}
```
"""
