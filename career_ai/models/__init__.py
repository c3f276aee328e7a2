# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import user, cover_letter, industry_insight, assessment, resume

# Explicit class exports for cleaner imports
from .user import User
from .cover_letter import CoverLetter
from .industry_insight import IndustryInsight
from .assessment import Assessment
from .resume import Resume

__all__ = [
    "User",
    "CoverLetter",
    "IndustryInsight",
    "Assessment",
    "Resume",
]
