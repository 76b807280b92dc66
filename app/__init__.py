"""
Transcript Service
In-memory academic records: students and the grades they earn in courses.

Architecture:
- TranscriptStore: owns all student/grade state (app.services)
- FastAPI routes: thin HTTP adapter over the store (app.api)
"""

__version__ = "1.0.0"
