import pytest
from pydantic import ValidationError

from app.schemas.common import BloomLevel
from app.schemas.flashcards import GenerateFlashcardsInput, GenerateFlashcardsOutput
from app.schemas.notes import GenerateNotesInput, GenerateNotesOutput, NoteLength
from app.schemas.ocr import OCRHandwrittenNotesInput
from app.schemas.practice_test import (
    DescriptiveQuestion,
    GeneratePracticeTestInput,
    GeneratePracticeTestOutput,
    MCQQuestion,
)

VALID_OUTPUT = {
    "testTitle": "Cells",
    "questions": [
        {
            "kind": "mcq",
            "questionText": "Powerhouse of the cell?",
            "options": ["Nucleus", "Mitochondria"],
            "correctOptionIndex": 1,
            "bloomLevel": "Remember",
        },
        {"kind": "descriptive", "questionText": "Explain osmosis."},
    ],
}


def test_valid_output_round_trips():
    output = GeneratePracticeTestOutput.model_validate(VALID_OUTPUT)
    dumped = output.model_dump(by_alias=True, exclude_none=True)
    assert GeneratePracticeTestOutput.model_validate(dumped) == output
    assert isinstance(output.questions[0], MCQQuestion)
    assert output.questions[0].bloom_level == BloomLevel.REMEMBER
    assert isinstance(output.questions[1], DescriptiveQuestion)


@pytest.mark.parametrize("field", ["testTitle", "questions"])
def test_missing_required_output_field_fails(field):
    data = dict(VALID_OUTPUT)
    del data[field]
    with pytest.raises(ValidationError):
        GeneratePracticeTestOutput.model_validate(data)


@pytest.mark.parametrize("field", ["testTitle", "questions"])
def test_null_required_output_field_fails(field):
    data = dict(VALID_OUTPUT, **{field: None})
    with pytest.raises(ValidationError):
        GeneratePracticeTestOutput.model_validate(data)


@pytest.mark.parametrize("index", [-1, 2, 7])
def test_correct_option_index_must_be_in_range(index):
    with pytest.raises(ValidationError):
        MCQQuestion.model_validate({
            "questionText": "Q?",
            "options": ["a", "b"],
            "correctOptionIndex": index,
        })


def test_mcq_needs_two_options():
    with pytest.raises(ValidationError):
        MCQQuestion.model_validate({
            "questionText": "Q?",
            "options": ["only"],
            "correctOptionIndex": 0,
        })


def test_descriptive_rejects_stray_answer_fields():
    with pytest.raises(ValidationError):
        GeneratePracticeTestOutput.model_validate({
            "testTitle": "T",
            "questions": [{"kind": "descriptive", "questionText": "Q?", "correctOptionIndex": 0}],
        })


def test_kind_inferred_when_missing():
    output = GeneratePracticeTestOutput.model_validate({
        "testTitle": "T",
        "questions": [
            {"questionText": "Q1?", "options": ["a", "b"], "correctOptionIndex": 0},
            {"questionText": "Q2?"},
        ],
    })
    assert [q.kind for q in output.questions] == ["mcq", "descriptive"]


def test_unknown_kind_rejected():
    with pytest.raises(ValidationError):
        GeneratePracticeTestOutput.model_validate({
            "testTitle": "T",
            "questions": [{"kind": "truefalse", "questionText": "Q?"}],
        })


def test_invalid_bloom_level_rejected():
    with pytest.raises(ValidationError):
        GeneratePracticeTestInput.model_validate({
            "textContent": "x",
            "questionType": "multipleChoice",
            "numberOfQuestions": 3,
            "bloomLevel": "Memorize",
        })


@pytest.mark.parametrize("count", [0, -2, 101])
def test_number_of_questions_bounds(count):
    with pytest.raises(ValidationError):
        GeneratePracticeTestInput.model_validate({
            "textContent": "x",
            "questionType": "descriptive",
            "numberOfQuestions": count,
        })


def test_inputs_accept_snake_case_and_apply_defaults():
    flashcards = GenerateFlashcardsInput(text_content="Photosynthesis")
    assert flashcards.number_of_flashcards == 10

    notes = GenerateNotesInput.model_validate({"textContent": "Photosynthesis"})
    assert notes.note_length == NoteLength.MEDIUM


def test_photo_must_be_data_uri():
    OCRHandwrittenNotesInput.model_validate({"photoDataUri": "data:image/png;base64,iVBORw0KGgo="})
    with pytest.raises(ValidationError):
        OCRHandwrittenNotesInput.model_validate({"photoDataUri": "https://example.com/a.png"})


def test_blank_titles_fail():
    with pytest.raises(ValidationError):
        GenerateFlashcardsOutput.model_validate({"title": "  ", "flashcards": []})
    with pytest.raises(ValidationError):
        GenerateNotesOutput.model_validate({"title": "T", "notesContent": ""})
