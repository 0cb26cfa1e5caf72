# verse/prompts/__init__.py

from .prompt_manager import PromptManager, PromptTemplate, PromptCategory

# Shared instance, templates are loaded from disk once
_global_prompt_manager = None

def get_global_prompt_manager() -> PromptManager:
    """Get the global prompt manager instance."""
    global _global_prompt_manager
    if _global_prompt_manager is None:
        _global_prompt_manager = PromptManager()
    return _global_prompt_manager

__all__ = [
    'PromptManager',
    'PromptTemplate',
    'PromptCategory',
    'get_global_prompt_manager'
]
