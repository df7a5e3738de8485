"""Standard column definitions for consistency."""
from sqlalchemy import BigInteger, Column, Integer, String

# SQLite only autoincrements INTEGER PRIMARY KEY columns
BigIntegerId = BigInteger().with_variant(Integer(), "sqlite")


def bigint_pk():
    return Column(
        BigIntegerId,
        primary_key=True,
        autoincrement=True,
    )

def actor_id():
    return Column(
        BigIntegerId,
        nullable=True,
    )

def short_string(length: int = 32, nullable: bool = True):
    return Column(String(length), nullable=nullable)
