"""스토리지 모듈."""

from trend_memo.storage.base import SaveNewTrend, UserTrendRepository
from trend_memo.storage.memory import InMemoryTrendRepository
from trend_memo.storage.records import TrendRecord, convert_records
from trend_memo.storage.supabase import SupabaseTrendRepository

__all__ = [
    "InMemoryTrendRepository",
    "SaveNewTrend",
    "SupabaseTrendRepository",
    "TrendRecord",
    "UserTrendRepository",
    "convert_records",
]
