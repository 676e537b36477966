from datetime import datetime, timezone


def utc_now() -> datetime:
    """Timezone-aware UTC timestamp used for created_at / updated_at / deleted_at."""
    return datetime.now(timezone.utc)
