"""UI constants used by the desktop shell and the study page."""

WINDOW_TITLE: str = "SelfQuiz"
RESULTS_CONTAINER_ID: str = "right-panel"

LEVELS: tuple[tuple[str, str], ...] = (
    ("level1", "一级"),
    ("level2", "二级"),
    ("level3", "三级"),
    ("level4", "四级"),
    ("level5", "五级"),
    ("level6", "六级"),
    ("level7", "七级"),
    ("level8", "八级"),
)
DEFAULT_LEVEL: str = "level1"

EMPTY_QUESTION_LIST_MESSAGE: str = "当前知识点暂无题目"
LOAD_FAILED_MESSAGE: str = "加载题目失败，请稍后重试"
EMPTY_LEVEL_MESSAGE: str = "暂无题目"
EMPTY_KNOWLEDGE_LIST_ITEM: str = "该级别暂无知识点"

KNOWLEDGE_LIST_WIDTH: int = 220
