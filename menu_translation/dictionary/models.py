from sqlalchemy import Column, Integer, String, Text, Index
from menu_translation.database import Base
from menu_translation.orm_mixins import TimestampMixin


class DictionaryTerm(Base, TimestampMixin):
    """Curated Japanese culinary terminology (read-only to the translation pipeline)"""
    __tablename__ = "dictionary"

    id = Column(String(64), primary_key=True)
    term_ja = Column(Text, nullable=False)
    reading = Column(Text, nullable=True)
    term_en = Column(Text, nullable=True)
    term_zh = Column(Text, nullable=True)
    category = Column(String(50), nullable=True)
    subcategory = Column(String(50), nullable=True)
    priority = Column(Integer, nullable=False, default=5)
    type = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)

    __table_args__ = (
        Index('ix_dictionary_priority', 'priority'),
        Index('ix_dictionary_term_ja', 'term_ja'),
    )
