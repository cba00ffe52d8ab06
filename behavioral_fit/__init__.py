"""behavioral-fit: DISC/MBTI behavioral fit scoring for recruitment."""

__version__ = "0.1.0"
