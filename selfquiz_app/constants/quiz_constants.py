"""Card rendering and grading constants shared across core and server layers."""

TRUE_MARKERS: frozenset[str] = frozenset({"true", "对", "√"})
FALSE_MARKERS: frozenset[str] = frozenset({"false", "错", "×"})

TRUE_KEY: str = "true"
FALSE_KEY: str = "false"
TRUE_FALSE_OPTIONS: tuple[tuple[str, str], ...] = (
    ("A. 对", TRUE_KEY),
    ("B. 错", FALSE_KEY),
)
TRUE_FALSE_ANSWER_TEXT: dict[str, str] = {TRUE_KEY: "对", FALSE_KEY: "错"}

CODE_LANGUAGE_CLASS: str = "language-cpp"
SAMPLE_LANGUAGE_CLASS: str = "language-plaintext"
QUESTION_IMAGE_ALT: str = "题目图片"

ANSWER_LABEL: str = "正确答案："
EXPLANATION_LABEL: str = "解析："
SOURCE_LABEL: str = "出处："

INPUT_FORMAT_LABEL: str = "输入格式："
OUTPUT_FORMAT_LABEL: str = "输出格式："
SAMPLE_INPUT_LABEL: str = "样例输入："
SAMPLE_OUTPUT_LABEL: str = "样例输出："

SELECTED_CLASS: str = "selected"
