"""
Flashcard Prompts
"""

from app.ai.prompts.base import FlowPrompt


GENERATE_FLASHCARDS_PROMPT = FlowPrompt(
    name="generateFlashcardsPrompt",
    version="1",
    media_variables=("fileDataUri",),
    template="""You are an expert in creating concise and effective study materials, specifically Q&A style flashcards.
Your task is to generate a set of flashcards based on the provided material.

{{#hasSourceDocument}}
A source document is attached. Use it together with the material below.
{{/hasSourceDocument}}
Source Material:
{{{textContent}}}

FLASHCARD REQUIREMENTS:
1. Generate approximately {{{numberOfFlashcards}}} flashcards.
2. Each flashcard has a 'front' (question/term) and a 'back' (answer/definition).
3. Use PLAIN TEXT. For formulas, equations or scientific notation use LaTeX: inline '$...$', display '$$...$$'.
   Avoid Markdown formatting outside LaTeX.
4. Generate a concise 'title' for the set.
5. Keep every card relevant to the provided material.

OUTPUT FORMAT:
Return ONLY a JSON object with the data (not the schema itself) matching this JSON Schema:
{{{outputSchema}}}""",
)
