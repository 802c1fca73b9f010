from typing import Final

PLANS_LIST_LIMIT: Final[int] = 20
TASKS_LEGACY_DELIMITER: Final[str] = ","

ANALYZE_SYSTEM_INSTRUCTION: Final[str] = "You are a productivity expert helping improve weekly plans."
UPLOAD_SYSTEM_INSTRUCTION: Final[str] = (
    "You're a helpful assistant summarizing and giving insights from user-uploaded documents."
)

ANALYZE_PROMPT_TEMPLATE: Final[str] = (
    'Here is a weekly plan titled "{title}" with steps:\n{steps}\n\n'
    "Please provide suggestions to improve this plan in a numbered list."
)
UPLOAD_PROMPT_TEMPLATE: Final[str] = (
    "Here is a document:\n{document}\n\n"
    "Give suggestions or a summary in a bullet list."
)
