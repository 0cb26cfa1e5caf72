# verse/llm/base_llm.py

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field
import logging

@dataclass
class LLMConfig:
    """Model and connection settings for a text-generation service"""
    model_name: str
    temperature: float = 0.7
    max_tokens: Optional[int] = None
    top_p: float = 1.0
    timeout: int = 60
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    extra_params: Dict[str, Any] = field(default_factory=dict)

@dataclass
class LLMResponse:
    """Generated text plus whatever the service reports about the call"""
    content: str
    model: str
    usage: Optional[Dict[str, int]] = None
    finish_reason: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

class LLMError(Exception):
    """Base class for text-generation failures"""
    pass

class LLMConnectionError(LLMError):
    """The service could not be reached or rejected the credentials"""
    pass

class LLMTimeoutError(LLMError):
    """The service did not answer in time"""
    pass

class LLMRateLimitError(LLMError):
    """Too many requests (HTTP 429)"""
    pass

class LLMPaymentRequiredError(LLMError):
    """The account has run out of credits (HTTP 402)"""
    pass

class LLMInvalidRequestError(LLMError):
    """The service refused the request as malformed"""
    pass


class BaseLLM(ABC):
    """
    Abstract base class for text-generation providers.

    Poems, titles and structure reviews are all produced through this
    interface, so generation code never depends on a specific vendor client.
    """

    def __init__(self, config: LLMConfig):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self._check_config()

    @abstractmethod
    def generate(self, prompt: str, system_prompt: Optional[str] = None, **kwargs) -> str:
        """
        Return the model's answer to a prompt.

        Args:
            prompt: User message
            system_prompt: Optional system instruction sent before the prompt
            **kwargs: Per-call overrides such as temperature or max_tokens

        Raises:
            LLMError: If the service call fails
        """
        pass

    @abstractmethod
    def generate_with_metadata(self, prompt: str, system_prompt: Optional[str] = None,
                               **kwargs) -> LLMResponse:
        """Like generate, but keep usage and finish information."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        pass

    def _check_config(self):
        config = self.config
        if not config.model_name:
            raise ValueError("A model name must be configured")
        if not 0 <= config.temperature <= 2:
            raise ValueError(f"Temperature {config.temperature} is outside 0..2")
        if not 0 <= config.top_p <= 1:
            raise ValueError(f"top_p {config.top_p} is outside 0..1")
        if config.max_tokens is not None and config.max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {config.max_tokens}")

    def _build_messages(self, prompt: str, system_prompt: Optional[str] = None) -> List[Dict[str, str]]:
        """Build a chat message list from an optional system prompt and the user prompt."""
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        return messages

    def _merge_params(self, **kwargs) -> Dict[str, Any]:
        """Request parameters from the config, with per-call overrides applied last."""
        params = {
            'model': self.config.model_name,
            'temperature': self.config.temperature,
            'top_p': self.config.top_p,
        }
        if self.config.max_tokens:
            params['max_tokens'] = self.config.max_tokens
        params.update(self.config.extra_params)
        params.update(kwargs)
        return params

    def get_model_info(self) -> Dict[str, Any]:
        return {
            'provider': type(self).__name__,
            'model': self.config.model_name,
            'temperature': self.config.temperature,
        }


class MockLLM(BaseLLM):
    """
    Offline stand-in used by tests and the "mock" provider.

    Scripted responses are returned in rotation. Without a script the answer
    depends on the system prompt, never on the user prompt, so a topic like
    "Title fight" still gets a poem: reviewers asking for JSON get a verdict,
    title requests get a quoted title and everything else gets a haiku.
    """

    DEFAULT_POEM = "An old silent pond\nA frog jumps into the pond\nSplash, silence again"
    DEFAULT_TITLE = '"Ripples on Still Water"'
    DEFAULT_REVIEW = '{"is_valid": true, "feedback": "The poem follows the expected structure."}'

    def __init__(self, config: LLMConfig, responses: Optional[List[str]] = None):
        super().__init__(config)
        self.responses = list(responses or [])
        self.call_count = 0
        self.last_prompt = None
        self.last_system_prompt = None

    def generate(self, prompt: str, system_prompt: Optional[str] = None, **kwargs) -> str:
        self.call_count += 1
        self.last_prompt = prompt
        self.last_system_prompt = system_prompt
        self.logger.debug(f"Mock call {self.call_count}: {prompt[:80]}...")

        if self.responses:
            return self.responses[(self.call_count - 1) % len(self.responses)]

        lowered = (system_prompt or "").lower()
        if "json" in lowered:
            return self.DEFAULT_REVIEW
        if "title" in lowered:
            return self.DEFAULT_TITLE
        return self.DEFAULT_POEM

    def generate_with_metadata(self, prompt: str, system_prompt: Optional[str] = None,
                               **kwargs) -> LLMResponse:
        content = self.generate(prompt, system_prompt, **kwargs)
        return LLMResponse(
            content=content,
            model=self.config.model_name,
            usage={'prompt_tokens': len(prompt.split()), 'completion_tokens': len(content.split())},
            finish_reason='stop',
            metadata={'mock': True, 'call': self.call_count}
        )

    def is_available(self) -> bool:
        return True
