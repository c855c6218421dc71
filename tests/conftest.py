# tests/conftest.py
from __future__ import annotations
import io

import pytest
import spacy
from fastapi.testclient import TestClient

from proofline.main import app

import fitz  # PyMuPDF
import docx

# --------------------------------------------------------------------
# FastAPI test client available as fixture `client`
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)

# --------------------------------------------------------------------
# Always run the rule-based corrector unless a test opts in to another
# --------------------------------------------------------------------
@pytest.fixture(autouse=True)
def default_corrector(monkeypatch):
    monkeypatch.delenv("PROOFLINE_CORRECTOR", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

# --------------------------------------------------------------------
# Avoid downloading en_core_web_sm: a blank English pipeline with a
# rule-based sentencizer is enough for sentence boundaries
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def blank_nlp():
    nlp = spacy.blank("en")
    nlp.add_pipe("sentencizer")
    return nlp

@pytest.fixture(autouse=True)
def stub_spacy(monkeypatch, blank_nlp):
    from proofline.services import style
    monkeypatch.setattr(style, "_nlp", blank_nlp)

# --------------------------------------------------------------------
# Avoid requiring Java/LanguageTool during tests
# --------------------------------------------------------------------
class FakeMatch:
    def __init__(self, offset=10, length=6, msg="Possible spelling mistake found.",
                 replacements=("sample",), issue_type="misspelling", rule_id="MORFOLOGIK_RULE_EN_US"):
        self.offset = offset
        self.errorLength = length
        self.message = msg
        self.ruleId = rule_id
        self.ruleIssueType = issue_type
        self.replacements = list(replacements)

class FakeLT:
    def check(self, text: str):
        i = text.find("smaple")
        return [FakeMatch(offset=i)] if i >= 0 else []

@pytest.fixture(autouse=True)
def stub_language_tool(monkeypatch):
    from proofline.services import languagetool as lt_mod
    monkeypatch.setattr(lt_mod, "LanguageTool", lambda *a, **k: FakeLT())
    monkeypatch.setattr(lt_mod, "_LT", None)

# --------------------------------------------------------------------
# Helpers to create in-memory sample files
# --------------------------------------------------------------------
def _pdf_bytes(text: str) -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 100), text, fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data

def _docx_bytes(text: str) -> bytes:
    d = docx.Document()
    for p in text.split("\n\n"):
        d.add_paragraph(p)
    buf = io.BytesIO()
    d.save(buf)
    return buf.getvalue()

@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return _pdf_bytes("She dont like it. Teh grammer is fine.")

@pytest.fixture
def sample_docx_bytes() -> bytes:
    return _docx_bytes("She dont like it.\n\nAnother paragraph here.")

@pytest.fixture
def sample_txt_bytes() -> bytes:
    return b"She dont like it.\r\n\r\nThis is a plain text file with a few words in it.\n"
