SUMMARIZE_TEMPLATE = "Please provide a concise summary of the following text:\n\n{text}"

QUIZ_GENERATION_TEMPLATE = (
    'Create exactly {count} multiple choice questions about "{text}". For each question, provide:\n'
    "1. The question\n"
    "2. Four answer options (A, B, C, D)\n"
    "3. The correct answer\n"
    "\n"
    "Format each question clearly."
)
