import pytest
from verse.prompts.prompt_manager import PromptManager, PromptTemplate, PromptCategory


class TestPromptManager:

    def test_get_template_poem_generation(self, prompt_manager):
        """Test getting poem_generation template"""
        template = prompt_manager.get_template('poem_generation')
        assert template.name == 'poem_generation'
        assert template.category == PromptCategory.GENERATION
        assert template.parameters == ['structure', 'topic']

    def test_get_template_structure_validation(self, prompt_manager):
        """Test getting structure_validation template"""
        template = prompt_manager.get_template('structure_validation')
        assert template.category == PromptCategory.EVALUATION
        assert set(template.parameters) == {'poem_type', 'structure', 'content'}

    def test_system_templates_have_no_parameters(self, prompt_manager):
        assert prompt_manager.get_template('poem_generation_system').parameters == []
        assert prompt_manager.get_template('structure_validation_system').parameters == []

    def test_get_template_not_found(self, prompt_manager):
        """Test getting a non-existent template raises KeyError"""
        with pytest.raises(KeyError, match="Template 'nonexistent' not found"):
            prompt_manager.get_template('nonexistent')

    def test_get_templates_by_category(self, prompt_manager):
        generation = {t.name for t in prompt_manager.get_templates_by_category(PromptCategory.GENERATION)}
        evaluation = {t.name for t in prompt_manager.get_templates_by_category(PromptCategory.EVALUATION)}

        assert generation == {'poem_generation', 'poem_generation_system',
                              'title_generation', 'title_generation_system'}
        assert evaluation == {'structure_validation', 'structure_validation_system'}

    def test_format_prompt(self, prompt_manager):
        prompt = prompt_manager.format_prompt('title_generation', form_name='ode', excerpt='O wild West Wind')
        assert 'for this ode: O wild West Wind...' in prompt

    def test_format_prompt_missing_parameters(self, prompt_manager):
        with pytest.raises(ValueError, match="Missing required parameters"):
            prompt_manager.format_prompt('poem_generation', topic='rain')

    def test_poem_text_with_braces_is_inserted_verbatim(self, prompt_manager):
        prompt = prompt_manager.format_prompt(
            'structure_validation', poem_type='ode', structure='stanzas', content='{curly} verse'
        )
        assert '{curly} verse' in prompt

    def test_add_template(self, prompt_manager):
        prompt_manager.add_template(PromptTemplate(
            name='custom', description='test', template='Hello {name}',
            category=PromptCategory.GENERATION, parameters=['name'], metadata={}
        ))
        assert prompt_manager.format_prompt('custom', name='poet') == 'Hello poet'

    def test_custom_directory(self, tmp_path):
        category_dir = tmp_path / "evaluation"
        category_dir.mkdir()
        (category_dir / "echo.yaml").write_text(
            "name: echo\ndescription: echo back\ntemplate: 'Echo {text}'\n", encoding="utf-8"
        )
        (category_dir / "broken.yaml").write_text("name: broken\n", encoding="utf-8")

        manager = PromptManager(str(tmp_path))

        assert manager.list_templates() == ['echo']
        assert manager.format_prompt('echo', text='hi') == 'Echo hi'

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PromptManager(str(tmp_path / "missing"))
