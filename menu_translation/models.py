from datetime import datetime
from zoneinfo import ZoneInfo
from pydantic import BaseModel, ConfigDict


def datetime_to_gmt_str(dt: datetime) -> str:
    """Convert datetime to GMT string format"""
    if not dt.tzinfo:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    return dt.strftime("%Y-%m-%dT%H:%M:%S%z")


class CustomModel(BaseModel):
    """Custom base model with global configurations"""
    model_config = ConfigDict(
        json_encoders={datetime: datetime_to_gmt_str},
        populate_by_name=True,
        from_attributes=True,
    )


def register_orm_models() -> None:
    """Import all SQLAlchemy models so they are registered with Base.metadata (needed by Alembic)."""
    from menu_translation.dictionary.models import DictionaryTerm  # noqa: F401
    from menu_translation.translation.models import TranslationCache  # noqa: F401
