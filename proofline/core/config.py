MAX_UPLOAD_BYTES = 5 * 1024 * 1024  # 5 MB hard cap for uploaded files
ALLOWED_EXTENSIONS = {'.txt', '.pdf', '.docx'}
MIME_ALLOW = {
    ".txt": {"text/plain"},
    ".pdf": {"application/pdf"},
    ".docx": {
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/zip",
    },
}

# Validator configuration
MAX_TEXT_LENGTH = 50_000    # characters, hard limit
SOFT_TEXT_LENGTH = 10_000   # characters, warn above this
REPEATED_CHAR_RUN = 20      # identical characters in a row
WHITESPACE_RUN = 10         # whitespace characters in a row

# Statistics configuration
WORDS_PER_MINUTE = 200
EASY_THRESHOLD = 60     # Flesch score at or above -> Easy
MEDIUM_THRESHOLD = 30   # Flesch score at or above -> Medium, below -> Hard

# Analyzer configuration
READABILITY_TARGET = 55  # Flesch Reading Ease target
LONG_SENTENCE_THRESHOLD = 25  # words
MANY_ERRORS_THRESHOLD = 3

# score penalty per finding
WEIGHTS = {
    "grammar": 1.5,
    "spelling": 1.5,
    "punctuation": 0.5,
    "style": 0.75,
    "clarity": 1.0,
}

DEFAULT_CORRECTOR = "rules"  # rules | languagetool | llm
