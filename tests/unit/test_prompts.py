"""Unit tests for prompt templating."""

from chef_gemini.models.models import Recipe, RecipeRequest
from chef_gemini.prompts.prompts import (
    DEFAULT_TEMPLATE,
    OUTPUT_SHAPE_CONTRACT,
    WITH_DETAILS_TEMPLATE,
    build_prompt,
)


class TestTemplateSelection:
    """Presence of details selects the template variant."""

    def test_name_only_uses_default_template(self):
        """Test that a request without details uses the default instruction."""
        prompt = build_prompt(RecipeRequest(name="Brownie"))

        assert prompt.startswith('Busque uma receita de "Brownie" e me devolva')
        assert "considerando" not in prompt

    def test_details_use_detailed_template(self):
        """Test that details are embedded after the name."""
        prompt = build_prompt(RecipeRequest(name="Pizza", details="sem gluten"))

        assert prompt.startswith('Busque uma receita de "Pizza", considerando "sem gluten" e me devolva')

    def test_no_placeholders_left(self):
        """Test that both variants fill every placeholder."""
        for request in (RecipeRequest(name="Pizza"), RecipeRequest(name="Pizza", details="vegana")):
            prompt = build_prompt(request)
            assert "{{name}}" not in prompt
            assert "{{details}}" not in prompt


class TestOutputShapeContract:
    """The output-shape contract is appended after a blank line."""

    def test_contract_appended(self):
        """Test the instruction and contract are separated by a blank line."""
        prompt = build_prompt(RecipeRequest(name="Brownie"))
        instruction = DEFAULT_TEMPLATE.replace("{{name}}", "Brownie")

        assert prompt == f"{instruction}\n\n{OUTPUT_SHAPE_CONTRACT}"

    def test_contract_names_every_recipe_field(self):
        """Test the contract mentions each field the decoder expects."""
        for field in Recipe.model_fields:
            assert f"{field}:" in OUTPUT_SHAPE_CONTRACT
        for field in ("total", "preparation?", "cooking?", "calories?", "carbs?", "protein?", "fat?"):
            assert field in OUTPUT_SHAPE_CONTRACT

    def test_contract_states_units_and_format(self):
        """Test units and the no-formatting instruction are present."""
        prompt = build_prompt(RecipeRequest(name="Brownie"))

        assert "em minutos" in prompt
        assert "'kcal'" in prompt
        assert "'gramas'" in prompt
        assert "JSON" in prompt
        assert "sem quebra de linha, sem formatação" in prompt
        assert "(em português)" in prompt


class TestDeterminism:
    """Same input, same prompt."""

    def test_same_request_same_prompt(self):
        """Test repeated builds are byte-identical."""
        first = build_prompt(RecipeRequest(name="Pizza", details="sem gluten"))
        second = build_prompt(RecipeRequest(name="Pizza", details="sem gluten"))

        assert first.encode() == second.encode()


class TestLiteralSubstitution:
    """Substitution is literal and first-occurrence only."""

    def test_user_text_not_escaped(self):
        """Test quotes and braces in user text are inserted as-is."""
        prompt = build_prompt(RecipeRequest(name='Bolo "fofo" {x}'))
        assert 'Busque uma receita de "Bolo "fofo" {x}"' in prompt

    def test_placeholder_in_name_is_not_guarded(self):
        """Test a name containing the details token swallows the details substitution."""
        prompt = build_prompt(RecipeRequest(name="A {{details}}", details="sem lactose"))
        expected = WITH_DETAILS_TEMPLATE.replace("{{name}}", "A {{details}}", 1).replace(
            "{{details}}", "sem lactose", 1
        )

        assert prompt.startswith(expected)
        assert 'Busque uma receita de "A sem lactose", considerando "{{details}}"' in prompt

