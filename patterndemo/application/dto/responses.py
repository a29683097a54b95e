"""Response DTOs returned by the pattern demo runner."""
from typing import List, Optional

from patterndemo.application.dto.base import BaseDTO


class DemoResultDTO(BaseDTO):
    """Trace produced by one demonstration run."""
    pattern: str
    variant: Optional[str] = None
    lines: List[str]
    original: Optional[List[str]] = None
    clone: Optional[List[str]] = None
