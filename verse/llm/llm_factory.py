# verse/llm/llm_factory.py

import logging
from typing import Optional

from .base_llm import BaseLLM, LLMConfig, LLMError, MockLLM
from .openai_adapter import OpenAIAdapter

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("openai", "mock")


def create_llm(provider: str, config: LLMConfig) -> BaseLLM:
    """
    Create an LLM instance for a provider name.
    
    Args:
        provider: "openai" (any OpenAI-compatible endpoint) or "mock"
        config: Model and connection settings
        
    Returns:
        Configured BaseLLM
        
    Raises:
        LLMError: If the provider is unknown or not configured
    """
    provider = (provider or "").lower()
    
    if provider == "openai":
        if not config.api_key:
            raise LLMError("No API key configured. Set VERSE_API_KEY or OPENAI_API_KEY.")
        return OpenAIAdapter(config)
    elif provider == "mock":
        return MockLLM(config)
    else:
        raise LLMError(f"Unknown LLM provider: {provider}")


def create_llm_from_config(config_manager=None) -> Optional[BaseLLM]:
    """Build the LLM described by the configuration, or None if no API key is set."""
    from verse.config import get_config_manager
    
    manager = config_manager or get_config_manager()
    provider_config = manager.get_llm_config()
    
    if provider_config.provider == "openai" and not provider_config.api_key:
        logger.warning("No API key configured, text generation is unavailable")
        return None
    
    llm_config = LLMConfig(
        model_name=provider_config.model,
        temperature=provider_config.temperature,
        api_key=provider_config.api_key,
        base_url=provider_config.base_url,
        timeout=provider_config.timeout
    )
    return create_llm(provider_config.provider, llm_config)
