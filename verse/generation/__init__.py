# verse/generation/__init__.py

from .poem_generator import PoemGenerator, GenerationError, RANDOM_TOPICS, pick_random_topic

__all__ = ['PoemGenerator', 'GenerationError', 'RANDOM_TOPICS', 'pick_random_topic']
