from enum import Enum

from rulegen.models import WriteStatus
from rulegen.rules.models import CursorRuleType


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


WRITE_STATUS_STYLE = {
    WriteStatus.CREATE: UIStyle.GREEN.value,
    WriteStatus.UPDATE: UIStyle.CYAN.value,
    WriteStatus.NOOP: UIStyle.DIM.value,
    WriteStatus.FAILED: UIStyle.RED.value,
}

RULE_TYPE_STYLE = {
    CursorRuleType.ALWAYS: UIStyle.GREEN.value,
    CursorRuleType.MANUAL: UIStyle.DIM.value,
    CursorRuleType.SPECIFIC_FILES: UIStyle.CYAN.value,
    CursorRuleType.INTELLIGENTLY: UIStyle.MAGENTA.value,
}
