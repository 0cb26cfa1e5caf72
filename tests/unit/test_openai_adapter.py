# tests/unit/test_openai_adapter.py

import httpx
import openai
import pytest
from unittest.mock import Mock
from verse.llm.base_llm import (
    LLMConfig, LLMResponse, LLMError, LLMConnectionError, LLMTimeoutError,
    LLMRateLimitError, LLMPaymentRequiredError, LLMInvalidRequestError
)
from verse.llm.openai_adapter import OpenAIAdapter

REQUEST = httpx.Request("POST", "https://gateway.example/v1/chat/completions")


def status_error(cls, status_code):
    response = httpx.Response(status_code, request=REQUEST)
    return cls(f"HTTP {status_code}", response=response, body=None)


def completion(content="An old silent pond"):
    response = Mock()
    response.choices = [Mock(message=Mock(content=content), finish_reason="stop")]
    response.usage = Mock(prompt_tokens=12, completion_tokens=7, total_tokens=19)
    response.model = "test-model"
    response.created = 1700000000
    response.id = "chatcmpl-1"
    return response


class TestOpenAIAdapter:

    def setup_method(self):
        self.client = Mock()
        self.config = LLMConfig(model_name="test-model", temperature=0.5)
        self.adapter = OpenAIAdapter(self.config, client=self.client)

    def test_generate(self):
        self.client.chat.completions.create.return_value = completion("Splash, silence again")

        assert self.adapter.generate("Write a haiku") == "Splash, silence again"

    def test_request_parameters(self):
        self.client.chat.completions.create.return_value = completion()

        self.adapter.generate("Write a haiku", system_prompt="You are a poet.")

        kwargs = self.client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["temperature"] == 0.5
        assert "max_tokens" not in kwargs
        assert kwargs["messages"] == [
            {"role": "system", "content": "You are a poet."},
            {"role": "user", "content": "Write a haiku"},
        ]

    def test_runtime_overrides(self):
        self.client.chat.completions.create.return_value = completion()

        self.adapter.generate("Write a haiku", temperature=0.1, max_tokens=50)

        kwargs = self.client.chat.completions.create.call_args.kwargs
        assert kwargs["temperature"] == 0.1
        assert kwargs["max_tokens"] == 50
        assert kwargs["messages"] == [{"role": "user", "content": "Write a haiku"}]

    def test_generate_with_metadata(self):
        self.client.chat.completions.create.return_value = completion()

        response = self.adapter.generate_with_metadata("Write a haiku")

        assert isinstance(response, LLMResponse)
        assert response.content == "An old silent pond"
        assert response.finish_reason == "stop"
        assert response.usage == {"prompt_tokens": 12, "completion_tokens": 7, "total_tokens": 19}
        assert response.metadata["id"] == "chatcmpl-1"

    def test_empty_content(self):
        self.client.chat.completions.create.return_value = completion(content=None)
        assert self.adapter.generate("Write a haiku") == ""

    @pytest.mark.parametrize("error,expected", [
        (status_error(openai.RateLimitError, 429), LLMRateLimitError),
        (status_error(openai.APIStatusError, 402), LLMPaymentRequiredError),
        (status_error(openai.AuthenticationError, 401), LLMConnectionError),
        (status_error(openai.BadRequestError, 400), LLMInvalidRequestError),
        (status_error(openai.InternalServerError, 500), LLMError),
        (openai.APITimeoutError(request=REQUEST), LLMTimeoutError),
        (openai.APIConnectionError(request=REQUEST), LLMConnectionError),
    ])
    def test_error_mapping(self, error, expected):
        self.client.chat.completions.create.side_effect = error

        with pytest.raises(expected):
            self.adapter.generate("Write a haiku")

    def test_rate_limit_message(self):
        self.client.chat.completions.create.side_effect = status_error(openai.RateLimitError, 429)

        with pytest.raises(LLMRateLimitError, match="Rate limit exceeded. Please try again later."):
            self.adapter.generate("Write a haiku")

    def test_is_available(self):
        self.client.chat.completions.create.return_value = completion()
        assert self.adapter.is_available() is True

        self.client.chat.completions.create.side_effect = openai.APIConnectionError(request=REQUEST)
        assert self.adapter.is_available() is False

    def test_api_key_required_without_client(self):
        with pytest.raises(LLMError, match="API key is required"):
            OpenAIAdapter(LLMConfig(model_name="test-model"))

    def test_builds_client_from_config(self):
        adapter = OpenAIAdapter(LLMConfig(model_name="test-model", api_key="sk-test",
                                          base_url="https://gateway.example/v1"))
        assert isinstance(adapter.client, openai.OpenAI)
        assert adapter.get_model_info()["base_url"] == "https://gateway.example/v1"


class TestLLMConfigValidation:

    @pytest.mark.parametrize("kwargs", [
        {"model_name": ""},
        {"model_name": "m", "temperature": 3},
        {"model_name": "m", "top_p": 1.5},
        {"model_name": "m", "max_tokens": 0},
    ])
    def test_invalid_config(self, kwargs):
        with pytest.raises(ValueError):
            OpenAIAdapter(LLMConfig(**kwargs), client=Mock())
