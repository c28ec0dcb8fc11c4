"""
webcv – turn a PDF résumé into a standalone HTML CV.
"""

from webcv.cleaner import normalize
from webcv.generator_rule import cv_filename, render_html
from webcv.schema_profile import EduItem, Profile, WorkItem

__all__ = ["normalize", "render_html", "cv_filename", "Profile", "WorkItem", "EduItem"]
