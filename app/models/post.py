from sqlalchemy import BigInteger, Column, Index, Integer, String
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import validates
from app.db.session import Base

MAX_LENGTH = 255
# largest id both MySQL BIGINT and SQLite INTEGER can bind
MAX_ID = 2**63 - 1

# BIGINT UNSIGNED on MySQL; SQLite only auto-increments an INTEGER primary key
PostId = (
    BigInteger()
    .with_variant(mysql.BIGINT(unsigned=True), "mysql")
    .with_variant(Integer(), "sqlite")
)


class Post(Base):
    __tablename__ = "posts"
    __table_args__ = (
        Index("index_title", "title"),
        {
            "comment": "posts table",
            "mysql_engine": "InnoDB",
            "mysql_charset": "utf8",
            # never hand out the id of a deleted row again, as InnoDB does
            "sqlite_autoincrement": True,
        },
    )

    id = Column(PostId, primary_key=True, autoincrement=True, comment="primary key")
    title = Column(String(MAX_LENGTH), nullable=False, default="", server_default="", comment="title")
    text = Column(String(MAX_LENGTH), nullable=False, default="", server_default="", comment="text")

    @validates("title", "text")
    def validate_length(self, key, value):
        if value is not None and len(value) > MAX_LENGTH:
            raise ValueError(f"{key} must be at most {MAX_LENGTH} characters")
        return value

    def __repr__(self):
        return f"<Post id={self.id} title={self.title!r}>"
