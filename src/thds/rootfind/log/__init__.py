"""Keyword-argument logging.

```
logger = getLogger(__name__)
logger.debug("checking directory", directory="/tmp/proj/sub")
# 2024-03-01 10:01:16,826 debug    thds.rootfind.project_root (directory=/tmp/proj/sub) checking directory
with logger_context(marker="Cargo.lock"):
    logger.debug("found project root", root="/tmp/proj")
# 2024-03-01 10:01:16,827 debug    thds.rootfind.project_root (marker=Cargo.lock,root=/tmp/proj) found project root
```
"""

from .basic_config import configure_console_logging  # noqa: F401
from .kw_formatter import ThdsCompactFormatter  # noqa: F401
from .kw_logger import KwLogger, getLogger, logger_context  # noqa: F401
