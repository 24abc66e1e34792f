from sqlalchemy import Integer
from sqlalchemy.dialects.mysql import INTEGER
from sqlmodel import SQLModel, Field
from typing import Optional

# INT UNSIGNED on MySQL, plain INTEGER elsewhere so SQLite still autoincrements
UnsignedInt = Integer().with_variant(INTEGER(unsigned=True), "mysql")


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True, sa_type=UnsignedInt)

    name: str = Field(max_length=128)

    email: str = Field(max_length=128, unique=True, index=True)

    # plain text, exactly as submitted; nothing hashes it
    password: str = Field(max_length=128)
