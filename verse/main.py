#!/usr/bin/env python3
"""
Command-line entry point: list forms, validate poems, and generate new ones.
"""

import sys
import logging
import argparse
from typing import List, Optional

from verse.config import get_config_manager
from verse.evaluation.form_validator import FormValidator
from verse.evaluation.poem_evaluation import PoemEvaluator, EvaluationType
from verse.generation.poem_generator import PoemGenerator, GenerationError, pick_random_topic
from verse.llm.base_llm import LLMError
from verse.llm.llm_factory import create_llm_from_config
from verse.models.form import PoemForm, FORM_SPECS
from verse.models.poem import Poem
from verse.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

FORM_CHOICES = [form.value for form in PoemForm]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='verse', description='Verse - poem generation and form validation')
    parser.add_argument('--config', '-c', help='Path to configuration file')
    parser.add_argument('--log-level', help='Logging level (overrides configuration)')
    
    subparsers = parser.add_subparsers(dest='command', required=True)
    
    subparsers.add_parser('forms', help='List supported poetic forms')
    
    validate = subparsers.add_parser('validate', help='Check a poem against the rules of its form')
    validate.add_argument('form', help=f"Poem form ({', '.join(FORM_CHOICES)})")
    validate.add_argument('file', nargs='?', help='Poem file (reads stdin when omitted)')
    validate.add_argument('--topic', '-t', help='Topic the poem was written about (acrostics)')
    validate.add_argument('--review', action='store_true', help='Also ask the language model for a review')
    
    generate = subparsers.add_parser('generate', help='Generate a poem about a topic')
    generate.add_argument('topic', help='What the poem should be about')
    target = generate.add_mutually_exclusive_group()
    target.add_argument('--form', '-f', default=PoemForm.SONNET.value, choices=FORM_CHOICES,
                        help='Poem form (default: sonnet)')
    target.add_argument('--all', action='store_true', help='Generate one poem for every form')
    generate.add_argument('--title', action='store_true', help='Also generate a title')
    generate.add_argument('--validate', action='store_true', help='Check the generated structure')
    
    subparsers.add_parser('random-topic', help='Suggest a topic')
    
    return parser


def cmd_forms(args, config) -> int:
    for spec in FORM_SPECS.values():
        print(f"{spec.form.value:<12} {spec.name} - {spec.lines}")
        print(f"{'':<12} {spec.structure}")
    return 0


def cmd_validate(args, config) -> int:
    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            text = f.read()
    else:
        text = sys.stdin.read()
    
    validation_config = config.get_validation_config()
    validator = FormValidator(syllable_tolerance=validation_config.syllable_tolerance)
    
    evaluations = [EvaluationType.STRUCTURE]
    llm = None
    if args.review or validation_config.review_enabled:
        llm = create_llm_from_config(config)
        if llm is not None:
            evaluations.append(EvaluationType.REVIEW)
    
    poem = Poem.from_text(text, form=PoemForm.parse(args.form), topic=args.topic)
    evaluator = PoemEvaluator(llm=llm, validator=validator)
    evaluator.evaluate_poem(poem, evaluations)

    quality = poem.quality
    result = quality.structure_validation
    if result.is_valid:
        print(f"Valid {result.form or 'poem'} ({result.line_count} lines)")
    else:
        print(result.error_details)

    if quality.structure_review:
        review = quality.structure_review
        print(f"Review: {'valid' if review.is_valid else 'invalid'} - {review.feedback}")
    elif quality.review_issues:
        print(quality.review_issues[0])

    return 0 if result.is_valid else 1


def cmd_generate(args, config) -> int:
    llm = create_llm_from_config(config)
    if llm is None:
        print("Error: no text-generation service configured. Set VERSE_API_KEY.")
        return 2
    
    generator = PoemGenerator(llm)
    if args.all:
        poems = list(generator.generate_all(args.topic).values())
    else:
        poems = [generator.generate_poem(args.topic, args.form)]
    
    if not poems:
        print("Generation failed: no poems were generated")
        return 1
    
    validator = FormValidator(syllable_tolerance=config.get_validation_config().syllable_tolerance)
    exit_code = 0
    for poem in poems:
        if args.title:
            try:
                poem.title = generator.generate_title(poem)
            except (GenerationError, LLMError) as e:
                logger.warning(f"No title for {poem.form.value}: {e}")
                print(f"Title generation failed: {e}")
        
        header = FORM_SPECS[poem.form].name
        if poem.title:
            header = f"{header}: {poem.title}"
        print(f"== {header} ==")
        print(poem.text)
        
        if args.validate:
            error = validator.check(poem.text, poem.form, poem.topic)
            if error:
                print(f"Invalid poem structure: {error}")
                exit_code = 1
            else:
                print("Structure OK")
        print()
    
    return exit_code


def cmd_random_topic(args, config) -> int:
    print(pick_random_topic())
    return 0


COMMANDS = {
    'forms': cmd_forms,
    'validate': cmd_validate,
    'generate': cmd_generate,
    'random-topic': cmd_random_topic,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    
    config = get_config_manager(args.config)
    logging_config = config.get_logging_config()
    configure_logging(
        level=args.log_level or logging_config.level,
        log_file=logging_config.file,
        fmt=logging_config.format
    )
    
    try:
        return COMMANDS[args.command](args, config)
    except (GenerationError, LLMError, OSError, UnicodeDecodeError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
