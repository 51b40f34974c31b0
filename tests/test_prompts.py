from app.ai.flows import FLOWS
from app.ai.flows.practice_test import GENERATE_PRACTICE_TEST_FLOW
from app.schemas.practice_test import GeneratePracticeTestInput


def _render(data):
    request = GeneratePracticeTestInput.model_validate(data)
    variables = GENERATE_PRACTICE_TEST_FLOW.build_variables(request)
    return GENERATE_PRACTICE_TEST_FLOW.prompt.render(variables)


def test_multiple_choice_prompt():
    text = _render({
        "textContent": "Force equals mass times acceleration & more",
        "questionType": "multipleChoice",
        "numberOfQuestions": 5,
    })

    assert "approximately 5 questions of type 'multipleChoice'" in text
    assert 'Set "kind" to "mcq"' in text
    assert 'Set "kind" to "descriptive"' not in text
    assert "general difficulty" in text
    # Source text is interpolated unescaped
    assert "Force equals mass times acceleration & more" in text
    assert "A source document is attached" not in text


def test_descriptive_prompt_with_bloom_and_document():
    text = _render({
        "textContent": "Ecosystems",
        "questionType": "descriptive",
        "numberOfQuestions": 2,
        "bloomLevel": "Analyze",
        "fileDataUri": "data:application/pdf;base64,JVBERi0=",
    })

    assert 'Set "kind" to "descriptive"' in text
    assert 'Set "kind" to "mcq"' not in text
    assert "Bloom's Taxonomy level: Analyze" in text
    assert "A source document is attached" in text
    assert "JVBERi0=" not in text


def test_every_prompt_embeds_output_schema():
    for flow in FLOWS.values():
        schema = flow.output_schema_json()
        assert "{{{outputSchema}}}" in flow.prompt.template
        assert '"properties"' in schema


def test_prompts_are_named_and_versioned():
    keys = [flow.prompt.key for flow in FLOWS.values()]
    assert len(set(keys)) == len(keys)
    assert all("@" in key for key in keys)
