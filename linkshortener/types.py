from datetime import datetime
from typing import Any
from collections.abc import Callable


# Type aliases for JSON-shaped Python dictionaries
type JSONBody = dict[str, Any]
type SettingsDocument = dict[str, Any]

# Callable returning the current time as a timezone-aware UTC datetime
type Clock = Callable[[], datetime]
