# verse/evaluation/structure_review.py

import json
import logging
import re
from typing import Any, Dict, Union

from verse.llm.base_llm import BaseLLM
from verse.models.form import PoemForm, get_form_spec
from verse.models.validation import StructureReview
from verse.prompts import get_global_prompt_manager

_FENCED_JSON = re.compile(r'```json\n?([\s\S]*?)\n?```')
_BARE_OBJECT = re.compile(r'\{[\s\S]*\}')


class StructureReviewError(Exception):
    """Raised when the structure review cannot be obtained or understood"""
    pass


class StructureReviewer:
    """
    Asks the language model whether a poem follows the rules of its form.
    
    Unlike the rule-based validator this review is advisory: it can judge
    meter, refrains and other properties the heuristics do not check, but it
    is neither deterministic nor free.
    """
    
    def __init__(self, llm: BaseLLM, **kwargs):
        self.llm = llm
        self.prompt_manager = get_global_prompt_manager()
        self.logger = logging.getLogger(__name__)
    
    def review(self, content: str, form: Union[PoemForm, str]) -> StructureReview:
        """
        Review a poem's structure.
        
        Args:
            content: Poem text
            form: Form the poem is meant to follow
            
        Returns:
            StructureReview with the model's verdict and feedback
            
        Raises:
            ValueError: If content or form is missing or the form is unknown
            StructureReviewError: If the response cannot be parsed
        """
        if not content or not content.strip() or not form:
            raise ValueError("Missing required fields: content, poemType, structure")
        
        try:
            spec = get_form_spec(form)
        except KeyError as e:
            raise ValueError(str(e)) from e

        prompt = self.prompt_manager.format_prompt(
            'structure_validation',
            poem_type=spec.name.lower(),
            structure=spec.structure,
            content=content.strip()
        )
        system_prompt = self.prompt_manager.format_prompt('structure_validation_system')
        
        response = self.llm.generate(prompt, system_prompt=system_prompt)
        data = self._parse_llm_response(response)
        
        review = StructureReview(is_valid=data['is_valid'], feedback=data.get('feedback') or "")
        self.logger.info(f"Structure review for {spec.form.value}: {'valid' if review.is_valid else 'invalid'}")
        return review
    
    def _parse_llm_response(self, response: str) -> Dict[str, Any]:
        """
        Parse the JSON verdict from the model response.
        
        The whole response is tried first, then a fenced ```json block, then
        the outermost braces.
        
        Raises:
            StructureReviewError: If no valid verdict can be extracted
        """
        response = (response or "").strip()
        try:
            data = json.loads(response)
        except json.JSONDecodeError:
            match = _FENCED_JSON.search(response) or _BARE_OBJECT.search(response)
            if not match:
                self.logger.error(f"Response text: {response[:200]}...")
                raise StructureReviewError("Could not parse AI response as JSON")
            try:
                data = json.loads(match.group(1) if match.groups() else match.group(0))
            except json.JSONDecodeError as e:
                self.logger.error(f"Failed to parse JSON response: {e}")
                raise StructureReviewError(f"Invalid JSON response: {e}") from e
        
        self._validate_response_structure(data)
        return data
    
    def _validate_response_structure(self, data: Any):
        """Check the verdict has a boolean is_valid and a string (or null) feedback."""
        if not isinstance(data, dict):
            raise StructureReviewError(f"Expected a JSON object, got {type(data).__name__}")
        
        if 'is_valid' not in data:
            raise StructureReviewError(f"Missing required fields: ['is_valid']. Response keys: {list(data.keys())}")
        
        if not isinstance(data['is_valid'], bool):
            raise StructureReviewError(
                f"'is_valid' must be a boolean, got {type(data['is_valid']).__name__}: {data['is_valid']}"
            )
        
        feedback = data.get('feedback')
        if feedback is not None and not isinstance(feedback, str):
            raise StructureReviewError(f"'feedback' must be a string or null, got {type(feedback).__name__}")
