# /halaqat-backend/app/db/base_class.py

from sqlalchemy.orm import declarative_base

# Every ORM model inherits from this Base so that one metadata object knows
# the full relational schema.
Base = declarative_base()
