import logging
from typing import Optional

from models import EmailRequest
from .gemini import GeminiClient

logger = logging.getLogger(__name__)

INSTRUCTION = (
    "Generate an email reply for the following email content. "
    "Do not generate a subject line. "
)


def build_prompt(email_content: str, tone: Optional[str] = None) -> str:
    prompt = INSTRUCTION
    if tone:
        prompt += f"Use a {tone} tone. "
    prompt += f"Original email:\n{email_content}"
    logger.debug("Generated prompt: %s", prompt)
    return prompt


def draft_reply(client: GeminiClient, request: EmailRequest) -> str:
    logger.info("Generating email reply for request...")
    prompt = build_prompt(request.emailContent, request.tone)
    return client.generate(prompt)
