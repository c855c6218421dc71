import os
import fitz          # PyMuPDF
import docx          # python-docx

def extract_text(path: str) -> str:
    """
    Return the plain text of a TXT, PDF or DOCX file, paragraphs separated by
    blank lines so paragraph statistics survive extraction.
    """
    ext = os.path.splitext(path)[1].lower()

    if ext == ".txt":
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    if ext == ".pdf":
        paras: list[str] = []
        with fitz.open(path) as doc:
            for page in doc:
                # 'blocks' yields tuples; index 4 is the text
                blocks = page.get_text("blocks") or []
                for b in blocks:
                    if isinstance(b, (list, tuple)) and len(b) >= 5:
                        text = (b[4] or "").strip()
                        if text:
                            paras.append(text)
        return "\n\n".join(paras)

    if ext == ".docx":
        d = docx.Document(path)
        return "\n\n".join(p.text.strip() for p in d.paragraphs if p.text and p.text.strip())

    raise ValueError(f"Unsupported extension: {ext}")
