from .clock import FakeClock
from .suggestions import FailingSuggestionProvider, RecordingSuggestionProvider

__all__ = ["FailingSuggestionProvider", "FakeClock", "RecordingSuggestionProvider"]
