"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "PocketQuiz"
MOBILE_URL_PLACEHOLDER: str = "http://<device-ip>:8000/"

NEXT_BUTTON: str = "Next"
FINISH_BUTTON: str = "Finish"
ABOUT_BUTTON: str = "About PocketQuiz"

QUESTION_PROGRESS_TEMPLATE: str = "Question {number} of {count}"
MULTI_CHOICE_HINT: str = "Select all that apply."
SINGLE_CHOICE_HINT: str = "Select one answer."
SCORE_TEMPLATE: str = "Score: {score}"
MOBILE_URL_TEMPLATE: str = "Play on your phone: {url}"

IMPORT_FAILED_TITLE: str = "Import failed"
IMPORT_FAILED_TEMPLATE: str = "Could not load {path}:\n\n{error}\n\nThe built-in sample questions are used instead."
