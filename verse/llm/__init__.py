# verse/llm/__init__.py

from .base_llm import (
    BaseLLM, 
    LLMConfig, 
    LLMResponse, 
    LLMError, 
    LLMConnectionError, 
    LLMTimeoutError, 
    LLMRateLimitError, 
    LLMPaymentRequiredError,
    LLMInvalidRequestError,
    MockLLM
)
from .openai_adapter import OpenAIAdapter
from .llm_factory import create_llm, create_llm_from_config

__all__ = [
    "BaseLLM",
    "LLMConfig", 
    "LLMResponse",
    "LLMError",
    "LLMConnectionError",
    "LLMTimeoutError",
    "LLMRateLimitError",
    "LLMPaymentRequiredError",
    "LLMInvalidRequestError",
    "MockLLM",
    "OpenAIAdapter",
    "create_llm",
    "create_llm_from_config"
]
