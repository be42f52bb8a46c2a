"""Static role and domain catalogue offered to interview clients."""
from __future__ import annotations

from typing import List

ROLES: List[str] = [
    "Software Engineer",
    "Data Scientist",
    "Product Manager",
    "UX Designer",
    "DevOps Engineer",
    "Machine Learning Engineer",
    "Full Stack Developer",
    "Backend Developer",
    "Frontend Developer",
    "Mobile Developer",
    "Cloud Architect",
    "Cybersecurity Analyst",
    "Business Analyst",
    "Project Manager",
    "Technical Lead",
]

DOMAINS: List[str] = [
    "Technology",
    "Finance",
    "Healthcare",
    "E-commerce",
    "Education",
    "Gaming",
    "Social Media",
    "IoT",
    "Blockchain",
    "AI/ML",
    "Cybersecurity",
    "Cloud Computing",
    "Mobile Development",
    "Web Development",
    "Data Analytics",
]

__all__ = ["DOMAINS", "ROLES"]
