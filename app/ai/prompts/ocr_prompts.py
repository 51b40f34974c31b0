"""
OCR Prompts
"""

from app.ai.prompts.base import FlowPrompt


OCR_HANDWRITTEN_NOTES_PROMPT = FlowPrompt(
    name="ocrHandwrittenNotesPrompt",
    version="1",
    media_variables=("photoDataUri",),
    template="""You are an OCR bot. Extract the text from the attached image of handwritten notes. Return the extracted text.

Preserve line breaks and list structure where they are visible. Do not summarize, correct or add anything.

OUTPUT FORMAT:
Return ONLY a JSON object matching this JSON Schema:
{{{outputSchema}}}""",
)
