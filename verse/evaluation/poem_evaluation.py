# verse/evaluation/poem_evaluation.py

import logging
from enum import Enum
from typing import List, Optional

from verse.evaluation.form_validator import FormValidator
from verse.evaluation.structure_review import StructureReviewer, StructureReviewError
from verse.llm.base_llm import BaseLLM, LLMError
from verse.models.poem import Poem
from verse.models.quality import QualityAssessment

logger = logging.getLogger(__name__)


class EvaluationType(Enum):
    """Types of evaluations that can be performed"""
    STRUCTURE = "structure"
    REVIEW = "review"


class PoemEvaluator:
    """
    Orchestrates the poem evaluation workflow by running the rule-based
    validator and, when a language model is available, the advisory
    structure review, then consolidating both into a quality assessment.
    """
    
    def __init__(self, llm: Optional[BaseLLM] = None, validator: Optional[FormValidator] = None):
        """
        Args:
            llm: LLM used for the structure review; without one reviews are skipped
            validator: Rule-based validator, defaults to FormValidator()
        """
        self.llm = llm
        self.validator = validator or FormValidator()
        self.reviewer = StructureReviewer(llm) if llm else None
    
    def evaluate_poem(self, poem: Poem, evaluations: List[EvaluationType],
                      original_topic: Optional[str] = None) -> Poem:
        """
        Evaluate poem using specified validators and update poem quality.
        
        Args:
            poem: The poem to evaluate
            evaluations: List of evaluation types to perform
            original_topic: Topic used for acrostic checks, defaults to poem.topic
            
        Returns:
            The same poem with structure_validation and quality filled in
        """
        logger.info(f"Starting poem evaluation with {len(evaluations)} evaluation types")
        topic = original_topic if original_topic is not None else poem.topic
        
        structure_issues = []
        review_issues = []
        structure_validation = None
        structure_review = None
        
        if EvaluationType.STRUCTURE in evaluations:
            logger.info("Performing structure validation")
            structure_validation = self.validator.validate(poem.text, poem.form, topic)
            poem.structure_validation = structure_validation
            if not structure_validation.is_valid:
                structure_issues.append(structure_validation.error_details)
        
        if EvaluationType.REVIEW in evaluations:
            if self.reviewer is None:
                logger.warning("Structure review requested but no LLM is configured, skipping")
            elif poem.form is None:
                logger.warning("Structure review needs a poem form, skipping")
            else:
                logger.info("Performing structure review")
                try:
                    structure_review = self.reviewer.review(poem.text, poem.form)
                    if not structure_review.is_valid:
                        review_issues.append(structure_review.feedback)
                except (StructureReviewError, LLMError, ValueError) as e:
                    logger.error(f"Error in structure review: {e}")
                    review_issues.append(f"Structure review failed: {e}")
        
        recommendations = []
        if structure_issues:
            recommendations.append("Fix the structural issue before saving or publishing")
        if review_issues:
            recommendations.append("Consider the reviewer's feedback on form and rhythm")
        
        poem.quality = QualityAssessment(
            structure_issues=structure_issues,
            review_issues=review_issues,
            is_acceptable=not structure_issues,
            recommendations=recommendations,
            structure_validation=structure_validation,
            structure_review=structure_review
        )
        
        logger.info("Poem evaluation completed")
        return poem
    
    def can_publish(self, poem: Poem, original_topic: Optional[str] = None) -> bool:
        """Whether the poem passes the structural rules required to save or publish it."""
        topic = original_topic if original_topic is not None else poem.topic
        return self.validator.check(poem.text, poem.form, topic) is None
