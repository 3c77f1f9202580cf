"""
Prompt templates for document Q&A, summaries, OCR and transcription
"""

from typing import Callable, Dict


CHAT_SYSTEM_INSTRUCTION = """You are Saathi.ai, an expert Supreme Court legal assistant specializing in Indian law.

CRITICAL INSTRUCTIONS:
1. You must answer questions based STRICTLY on the provided 'DOCUMENT CONTEXT'.
2. If the answer is not clearly stated or cannot be inferred from the document context, explicitly state: "I could not find this information in the provided document."
3. Use proper Indian legal terminology (e.g., "Hon'ble Court", "learned counsel", "petitioner", "respondent", "writ petition", "special leave petition", etc.)
4. Format your answers using Markdown for better readability:
   - Use **bold** for important terms and case names
   - Use bullet points for listing arguments or points
   - Use headers (##) for organizing longer responses
   - Quote relevant portions of the document when applicable
5. Be precise, professional, and concise in your responses.
6. When citing from the document, use quotation marks and reference the relevant section.
7. If asked about legal precedents or citations mentioned in the document, provide them accurately.

Remember: You are a legal research assistant, not providing legal advice. Always base your responses on the document provided."""


def build_chat_prompt(doc_text: str, message: str) -> str:
    """Wrap the user's question with the full document context"""
    return f"""
=== DOCUMENT CONTEXT ===
{doc_text}
=== END OF DOCUMENT CONTEXT ===

Based on the above document context, please answer the following question:

{message}
"""


def five_line_summary_prompt(text: str) -> str:
    return f"""
You are a junior advocate assisting a senior counsel in the Supreme Court of India.

Read the following case document and produce a STRICT 5-line summary covering:
1. Parties
2. Nature of dispute
3. Core legal issue
4. Current procedural stage
5. Relief sought

Rules:
- Use neutral legal language
- Do NOT invent facts
- If something is unclear, state "Not specified"

Document:
{text}
"""


def detailed_summary_prompt(text: str) -> str:
    return f"""
You are preparing a case brief for a senior advocate.

From the document below, extract and present the following headings:

1. Parties
2. Factual Background
3. Procedural History
4. Legal Issues
5. Arguments Raised
6. Reliefs Sought

Rules:
- Use clear headings
- Stick strictly to the document
- No assumptions
- No case law unless mentioned

Document:
{text}
"""


def chronology_prompt(text: str) -> str:
    return f"""
Extract ALL dates and related events from the document below.

Instructions:
- Present events in chronological order
- Use bullet points
- If date is approximate or inferred, clearly mark it

Document:
{text}
"""


def key_points_prompt(text: str) -> str:
    return f"""
You are assisting a senior advocate who needs the essentials of a document at a glance.

List the key points of the document below as a numbered list. Cover, where present:
- Holdings, findings or directions
- Obligations and rights of each party
- Deadlines, limitation periods and hearing dates
- Risks or open questions for the client

Rules:
- One point per line, at most 10 points
- Stick strictly to the document
- Do NOT invent facts

Document:
{text}
"""


SUMMARY_PROMPTS: Dict[str, Callable[[str], str]] = {
    "short": five_line_summary_prompt,
    "detailed": detailed_summary_prompt,
    "chronology": chronology_prompt,
    "key_points": key_points_prompt,
}


def build_summary_prompt(summary_type: str, text: str) -> str:
    """Pick the summary template for a summary type"""
    template = SUMMARY_PROMPTS.get(summary_type)
    if template is None:
        raise ValueError(f"Unknown summary type: {summary_type}")
    return template(text)


IMAGE_OCR_PROMPT = """Extract all text from this image exactly as it appears.

Instructions:
- Preserve paragraphs, headings, numbering and table rows
- Keep legal citations, case numbers and dates verbatim
- If any part is illegible, mark it as [illegible]

Provide only the extracted text without any additional commentary."""

SCANNED_PDF_OCR_PROMPT = """This PDF appears to be a scanned document. Extract all text from every page in reading order.

Instructions:
- Preserve paragraphs, headings, numbering and table rows
- Keep legal citations, case numbers and dates verbatim
- Separate pages with a blank line
- If any part is illegible, mark it as [illegible]

Provide only the extracted text without any additional commentary."""

# Whisper prompts condition vocabulary and style, they are not instructions
TRANSCRIPTION_PROMPT = (
    "Legal proceedings and consultation in the Supreme Court of India. "
    "Hon'ble Court, learned counsel, petitioner, respondent, writ petition, "
    "special leave petition, affidavit, vakalatnama."
)
