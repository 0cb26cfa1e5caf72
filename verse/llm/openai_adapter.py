# verse/llm/openai_adapter.py

import time
from typing import Optional, Dict, Any

import openai

from .base_llm import (
    BaseLLM, LLMConfig, LLMResponse, LLMError, LLMConnectionError, LLMTimeoutError,
    LLMRateLimitError, LLMPaymentRequiredError, LLMInvalidRequestError
)

class OpenAIAdapter(BaseLLM):
    """
    Chat-completions adapter built on the official OpenAI Python client.
    
    Works against OpenAI itself or any OpenAI-compatible gateway through
    ``base_url``.
    """
    
    def __init__(self, config: LLMConfig, client: Optional[Any] = None):
        super().__init__(config)
        
        if client is None:
            if not config.api_key:
                raise LLMError("OpenAI API key is required")
            client = openai.OpenAI(
                api_key=config.api_key,
                base_url=config.base_url,
                timeout=config.timeout
            )
        self.client = client
        
        self.logger.info(f"Initialized OpenAI adapter with model: {config.model_name}")
    
    def generate(self, prompt: str, system_prompt: Optional[str] = None, **kwargs) -> str:
        """Generate response using the chat completions API."""
        response = self.generate_with_metadata(prompt, system_prompt, **kwargs)
        return response.content
    
    def generate_with_metadata(self, prompt: str, system_prompt: Optional[str] = None,
                               **kwargs) -> LLMResponse:
        """Generate response with full metadata using the chat completions API."""
        params = self._merge_params(**kwargs)
        api_params = {k: v for k, v in params.items() if v is not None}
        api_params["messages"] = self._build_messages(prompt, system_prompt)
        
        self.logger.debug(f"Making OpenAI API call with model: {api_params['model']}")
        start_time = time.time()
        
        try:
            response = self.client.chat.completions.create(**api_params)
        except openai.AuthenticationError as e:
            self.logger.error(f"OpenAI authentication error: {e}")
            raise LLMConnectionError(f"Authentication failed: {e}") from e
        except openai.RateLimitError as e:
            self.logger.error(f"OpenAI rate limit error: {e}")
            raise LLMRateLimitError("Rate limit exceeded. Please try again later.") from e
        except openai.APITimeoutError as e:
            self.logger.error(f"OpenAI timeout error: {e}")
            raise LLMTimeoutError(f"Request timed out: {e}") from e
        except openai.BadRequestError as e:
            self.logger.error(f"OpenAI bad request error: {e}")
            raise LLMInvalidRequestError(f"Invalid request: {e}") from e
        except openai.APIConnectionError as e:
            self.logger.error(f"OpenAI connection error: {e}")
            raise LLMConnectionError(f"Connection failed: {e}") from e
        except openai.APIStatusError as e:
            self.logger.error(f"OpenAI API error {e.status_code}: {e}")
            if e.status_code == 402:
                raise LLMPaymentRequiredError("Payment required. Please add credits to continue.") from e
            raise LLMError(f"API error {e.status_code}: {e}") from e
        
        elapsed = time.time() - start_time
        
        choice = response.choices[0]
        content = choice.message.content or ""
        
        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens
            }
        
        metadata = {
            "response_time": elapsed,
            "model": response.model,
            "created": response.created,
            "id": response.id,
        }
        
        self.logger.debug(f"OpenAI API call completed in {elapsed:.2f}s")
        
        return LLMResponse(
            content=content,
            model=response.model,
            usage=usage,
            finish_reason=choice.finish_reason,
            metadata=metadata
        )
    
    def is_available(self) -> bool:
        """Check if the service answers a minimal request."""
        try:
            self.client.chat.completions.create(
                model=self.config.model_name,
                messages=[{"role": "user", "content": "test"}],
                max_tokens=1
            )
            return True
        except openai.OpenAIError as e:
            self.logger.warning(f"OpenAI availability check failed: {e}")
            return False
    
    def get_model_info(self) -> Dict[str, Any]:
        """Get information about the current model."""
        info = super().get_model_info()
        info.update({
            "provider": "openai",
            "base_url": self.config.base_url,
        })
        return info
