# verse/prompts/prompt_manager.py

import re
import yaml
import logging
from typing import Dict, Any, Optional, List
from pathlib import Path
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class PromptCategory(Enum):
    """Categories of prompts for different tasks"""
    GENERATION = "generation"
    EVALUATION = "evaluation"

@dataclass
class PromptTemplate:
    """Represents a single prompt template"""
    name: str
    description: str
    template: str
    category: PromptCategory
    parameters: List[str]
    metadata: Dict[str, Any]
    
    def format(self, **kwargs) -> str:
        """Format the template with provided parameters"""
        missing_params = set(self.parameters) - set(kwargs.keys())
        if missing_params:
            raise ValueError(f"Missing required parameters: {missing_params}")
        
        return self.template.format(**kwargs)

class PromptManager:
    """
    Manages prompt templates for generation and review.
    
    Templates live in YAML files under ``templates/<category>/`` and are
    loaded once, then formatted on demand.
    """
    
    def __init__(self, prompts_dir: Optional[str] = None):
        self.prompts_dir = Path(prompts_dir or self._get_default_prompts_dir())
        self._templates: Dict[str, PromptTemplate] = {}
        self._load_all_templates()
    
    def _get_default_prompts_dir(self) -> Path:
        """Get default prompts directory path"""
        return Path(__file__).parent / "templates"
    
    def _load_all_templates(self):
        """Load all prompt templates from the templates directory"""
        if not self.prompts_dir.exists():
            raise FileNotFoundError(f"Prompts directory not found: {self.prompts_dir}")
        
        for yaml_file in sorted(self.prompts_dir.rglob("*.yaml")):
            try:
                self._load_template_file(yaml_file)
            except (yaml.YAMLError, KeyError, ValueError) as e:
                logger.warning(f"Failed to load template {yaml_file}: {e}")
    
    def _load_template_file(self, yaml_file: Path):
        """Load a single template file"""
        with open(yaml_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        
        # Category comes from the directory the file lives in
        category = PromptCategory(yaml_file.parent.name)
        
        template = PromptTemplate(
            name=data['name'],
            description=data['description'],
            template=data['template'],
            category=category,
            parameters=self._extract_parameters(data['template']),
            metadata=data.get('metadata', {})
        )
        self._templates[template.name] = template
    
    def _extract_parameters(self, template_str: str) -> List[str]:
        """Extract parameter names from template string"""
        return sorted(set(re.findall(r'\{(\w+)\}', template_str)))
    
    def get_template(self, name: str) -> PromptTemplate:
        """Get a template by name"""
        if name not in self._templates:
            raise KeyError(f"Template '{name}' not found")
        return self._templates[name]
    
    def get_templates_by_category(self, category: PromptCategory) -> List[PromptTemplate]:
        """Get all templates in a specific category"""
        return [t for t in self._templates.values() if t.category == category]
    
    def list_templates(self) -> List[str]:
        """List all available template names"""
        return list(self._templates.keys())
    
    def format_prompt(self, template_name: str, **kwargs) -> str:
        """Format a prompt template with parameters"""
        return self.get_template(template_name).format(**kwargs)
    
    def add_template(self, template: PromptTemplate):
        """Add a template programmatically"""
        self._templates[template.name] = template