import os
from pathlib import Path

# =============================================================================
#   Project-level path constants
# =============================================================================
CONFIG_DIR:   Path = Path(__file__).parent
CONFIG_FILE:  Path = Path(os.environ.get("RESPONSE_ENVELOPE_CONFIG", CONFIG_DIR / "config.yml"))

# =============================================================================
#   Envelope constants
# =============================================================================
SUCCESS_CODE: int = 200
# Logical "generic failure" code used by error() and unauthorized().
# Catalogued ErrorCodes must never use it.
GENERIC_FAILURE_CODE: int = 0

LOCALIZED_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "success": "success",
        "failure": "failure",
        "unauthorized": "no permission",
    },
    "zh": {
        "success": "成功",
        "failure": "失败",
        "unauthorized": "无权限访问",
    },
}
