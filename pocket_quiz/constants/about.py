"""Static metadata describing PocketQuiz."""

APP_NAME = "PocketQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "PocketQuiz walks through a fixed set of single-choice, multi-choice and "
    "true/false questions and shows a scored summary at the end. Play it in "
    "the desktop window or from a phone browser on the same network."
)
