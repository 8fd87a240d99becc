from sqlalchemy import Column, Integer, Text, Enum, Index
from src.database import Base
from src.constants.languages import Language


class DictionaryItem(Base):
    """One translation of a vocabulary entry in one language"""
    __tablename__ = "dictionary_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vocabulary_id = Column(Integer, nullable=False)  # shared across languages
    language = Column(
        Enum(
            Language,
            native_enum=False,
            length=3,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    translation = Column(Text, nullable=False)

    # Sibling rows are always fetched by vocabulary_id
    __table_args__ = (
        Index('ix_dictionary_items_vocabulary_id', 'vocabulary_id'),
    )
