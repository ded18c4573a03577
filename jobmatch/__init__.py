"""
JobMatch - Keyword-overlap ATS scoring for resumes

Scores an uploaded resume PDF against a pasted job description using a crude
applicant tracking system (ATS) heuristic: the share of job-description
keywords that appear verbatim in the resume text.

Architecture:
- Intake Context: Upload staging and PDF text extraction
- Scoring Context: Keyword tokenization and match scoring
"""

__version__ = "0.1.0"
