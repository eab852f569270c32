"""Type aliases for the interpreter path service."""
from pathlib import Path
from typing import TypeAlias

Resource: TypeAlias = Path | None
