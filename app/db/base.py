# /halaqat-backend/app/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# Importing them here guarantees that `Base.metadata` knows every table
# before `create_all` runs.

from .base_class import Base

from .models.halaqa_models import Teacher, Parent, Student, DailyRecord, QuranError
