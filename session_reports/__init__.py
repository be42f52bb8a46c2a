from __future__ import annotations  # Interview results package exports

from .models import InterviewResults, build_results
from .pdf import generate_results_pdf, pdf_filename

__all__ = ["InterviewResults", "build_results", "generate_results_pdf", "pdf_filename"]
