# verse/generation/poem_generator.py

import logging
import random
import re
from typing import Dict, Iterable, Optional, Union

from verse.llm.base_llm import BaseLLM, LLMError
from verse.models.form import PoemForm, FORM_SPECS, get_form_spec
from verse.models.poem import Poem
from verse.prompts import get_global_prompt_manager

# Topics offered when the user asks for inspiration
RANDOM_TOPICS = [
    "Taylor Swift's 'All Too Well'",
    "Robert Frost's 'The Road Not Taken'",
    "Beyoncé's 'Halo'",
    "The Beatles' 'Here Comes the Sun'",
    "Maya Angelou's 'Still I Rise'",
    "Ed Sheeran's 'Perfect'",
    "Shakespeare's 'Shall I Compare Thee to a Summer's Day'",
    "Adele's 'Someone Like You'",
    "The Titanic movie",
    "Emily Dickinson's 'Hope is the thing with feathers'",
    "Coldplay's 'Fix You'",
    "The Lord of the Rings trilogy",
    "Billie Eilish's 'What Was I Made For'",
    "Walt Whitman's 'O Captain! My Captain!'",
    "Harry Potter's magical world",
    "Olivia Rodrigo's 'drivers license'",
    "Star Wars and the Force",
    "Edgar Allan Poe's 'The Raven'",
    "The Lion King's 'Circle of Life'",
    "Bob Dylan's 'Blowin' in the Wind'",
    "Avatar's Pandora",
    "Langston Hughes' 'Dreams'",
    "Queen's 'Bohemian Rhapsody'",
    "The Great Gatsby",
    "SZA's 'Kill Bill'",
    "Pride and Prejudice",
    "Drake's 'One Dance'",
    "The Notebook",
    "Leonard Cohen's 'Hallelujah'",
    "Stranger Things",
]

TITLE_EXCERPT_LENGTH = 200
_SURROUNDING_QUOTES = re.compile(r'^["\']|["\']$')


class GenerationError(Exception):
    """Raised when poem or title generation fails"""
    pass


def pick_random_topic(rng: Optional[random.Random] = None) -> str:
    """Pick a topic from RANDOM_TOPICS."""
    return (rng or random).choice(RANDOM_TOPICS)


class PoemGenerator:
    """
    Generates poems of a given form about a topic through the text-generation service.
    
    The generator only produces text: structural checking is left to the
    form validator so that callers can decide how to gate save and publish.
    """
    
    def __init__(self, llm: BaseLLM, **kwargs):
        self.llm = llm
        self.prompt_manager = get_global_prompt_manager()
        self.logger = logging.getLogger(self.__class__.__name__)
    
    def generate_poem(self, topic: str, form: Union[PoemForm, str]) -> Poem:
        """
        Generate a poem about a topic in the requested form.
        
        Args:
            topic: What the poem should be about
            form: Target poetic form
            
        Returns:
            Poem with verses, form and topic filled in
            
        Raises:
            GenerationError: If the topic is blank, the form unknown, or the
                service returns no poem
            LLMError: If the service call itself fails
        """
        if not topic or not topic.strip():
            raise GenerationError("Please enter what you'd like to write a poem about.")
        
        try:
            spec = get_form_spec(form)
        except KeyError as e:
            raise GenerationError(str(e)) from e
        
        topic = topic.strip()
        self.logger.info(f"Generating poem about: {topic} type: {spec.form.value}")
        
        system_prompt = self.prompt_manager.format_prompt('poem_generation_system')
        prompt = self.prompt_manager.format_prompt(
            'poem_generation',
            topic=topic,
            structure=spec.generation_structure
        )
        
        text = (self.llm.generate(prompt, system_prompt=system_prompt) or "").strip()
        if not text:
            raise GenerationError("No poem generated")
        
        poem = Poem.from_text(
            text,
            form=spec.form,
            topic=topic,
            llm_provider=self.llm.__class__.__name__,
            model_name=self.llm.config.model_name
        )
        self.logger.info(f"Generated {spec.name.lower()} with {poem.line_count} lines")
        return poem
    
    def generate_all(self, topic: str,
                     forms: Optional[Iterable[Union[PoemForm, str]]] = None) -> Dict[PoemForm, Poem]:
        """
        Generate one poem per form, skipping forms whose generation fails.
        
        Args:
            topic: What the poems should be about
            forms: Forms to generate, defaults to every catalogued form
            
        Returns:
            Mapping of form to generated poem, in request order
        """
        if not topic or not topic.strip():
            raise GenerationError("Please enter what you'd like to write a poem about.")
        
        poems: Dict[PoemForm, Poem] = {}
        for form in (forms if forms is not None else FORM_SPECS):
            parsed = PoemForm.parse(form)
            if parsed is None:
                self.logger.warning(f"Skipping unknown form: {form}")
                continue
            if parsed in poems:
                continue
            try:
                poems[parsed] = self.generate_poem(topic, parsed)
            except (GenerationError, LLMError) as e:
                self.logger.error(f"Error generating {parsed.value}: {e}")
        return poems
    
    def generate_title(self, poem: Poem) -> str:
        """
        Ask the service for a short title for a poem.
        
        Raises:
            GenerationError: If the poem is empty or no title comes back
        """
        if not poem.verses:
            raise GenerationError("Cannot title an empty poem")
        
        form_name = FORM_SPECS[poem.form].name.lower() if poem.form else "poem"
        prompt = self.prompt_manager.format_prompt(
            'title_generation',
            form_name=form_name,
            excerpt=poem.text[:TITLE_EXCERPT_LENGTH]
        )
        
        system_prompt = self.prompt_manager.format_prompt('title_generation_system')
        response = self.llm.generate(prompt, system_prompt=system_prompt) or ""
        title = _SURROUNDING_QUOTES.sub('', response.strip()).strip()
        if not title:
            raise GenerationError("Failed to generate title")
        
        self.logger.info(f"Generated title: {title}")
        return title
