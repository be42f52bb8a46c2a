import json
import re
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.routes import reset_sessions
from config.registry import GENERATE_KEY, bind_model
from config.settings import settings

_NUMBER = re.compile(r"question (\d+) of (\d+)")


class FakeModel:
    """Scripted stand-in for the generative model, keyed on prompt wording."""

    def __init__(self, score: int = 7):
        self.score = score
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if "evaluating a candidate's answer" in prompt:
            return json.dumps(
                {
                    "score": self.score,
                    "strengths": ["Clear structure"],
                    "weaknesses": ["Few metrics"],
                    "suggestions": ["Quantify impact"],
                    "overall_feedback": "Solid answer.",
                }
            )
        if "career coach" in prompt:
            return "```json\n" + json.dumps(
                {
                    "overall_score": float(self.score),
                    "strengths": ["Communication"],
                    "weaknesses": ["Depth"],
                    "recommendations": ["Practice system design"],
                    "final_feedback": "Well done.",
                    "key_insights": ["Calm under pressure"],
                }
            ) + "\n```"
        match = _NUMBER.search(prompt)
        number = match.group(1) if match else "?"
        return f"  Model question {number}?  \n"


@pytest.fixture(autouse=True)
def fake_model(monkeypatch):
    model = FakeModel()
    bind_model(GENERATE_KEY, model)
    monkeypatch.setattr(settings, "GOOGLE_API_KEY", "test-key", raising=False)
    reset_sessions()
    try:
        yield model
    finally:
        reset_sessions()
