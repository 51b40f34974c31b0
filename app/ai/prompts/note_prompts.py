"""
Note Prompts

Prompts for generated summary notes and for summarizing a user's note.
"""

from app.ai.prompts.base import FlowPrompt


GENERATE_NOTES_PROMPT = FlowPrompt(
    name="generateNotesPrompt",
    version="1",
    media_variables=("fileDataUri",),
    template="""You are an expert in creating fun, interactive, and easy-to-read summary notes from complex study materials.
Your task is to read the provided material and generate engaging summary notes that highlight key concepts and main points.

{{#hasSourceDocument}}
A source document is attached. Use it together with the material below.
{{/hasSourceDocument}}
Source Material:
{{{textContent}}}

NOTE REQUIREMENTS:
1. Length: {{{noteLength}}}.
   - short: readable in about 3 minutes. Very concise.
   - medium: readable in about 7 minutes. Balanced detail.
   - long: readable in about 10-12 minutes. More comprehensive.
2. Generate a concise 'title'. 'notesContent' MUST start with the same title as a Markdown H1 heading (e.g. "# Title").
3. Extract key concepts, definitions, main arguments and significant examples.
4. Structure with markdown: headings, bullets, bold and italics.
   For ALL formulas and scientific notation use LaTeX: inline '$...$', display '$$...$$'.
5. Use clear, motivating language. Emojis are fine when used sparingly.
6. Summarize; do not copy sentences from the material.

OUTPUT FORMAT:
Return ONLY a JSON object with the data (not the schema itself) matching this JSON Schema:
{{{outputSchema}}}""",
)


SUMMARIZE_NOTE_PROMPT = FlowPrompt(
    name="summarizeNotePrompt",
    version="1",
    template="""Summarize the following note content. Extract the key points and provide a concise summary.

Note Content:
{{{noteContent}}}

OUTPUT FORMAT:
Return ONLY a JSON object matching this JSON Schema:
{{{outputSchema}}}""",
)
