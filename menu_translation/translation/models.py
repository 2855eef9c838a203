from sqlalchemy import Column, String, Text, Integer, DateTime, Index
from menu_translation.database import Base


class TranslationCache(Base):
    """Previously produced translations, keyed by sha256(source_text + "_" + target_lang)"""
    __tablename__ = "translation_cache"

    key = Column(String(64), primary_key=True)
    source_text = Column(Text, nullable=False)
    source_lang = Column(String(8), nullable=False, default="ja")
    target_lang = Column(String(8), nullable=False)
    translated_text = Column(Text, nullable=False)
    method = Column(String(32), nullable=False)
    hit_count = Column(Integer, nullable=False, default=0)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    last_accessed_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index('ix_translation_cache_expires_at', 'expires_at'),
    )
