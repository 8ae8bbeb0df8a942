import json
import logging
from typing import Any, Optional

import httpx

from app.core.config import settings
from app.core.errors import ParseFailure, TransportFailure
from app.schemas.email import EmailRequest
from app.schemas.gemini import GenerateContentRequest
from app.services.context_service import ContextService, context_service

logger = logging.getLogger(__name__)

UNAVAILABLE_REPLY = "I apologize, but I'm unable to generate a reply at the moment. Please try again."
PARSE_ERROR_REPLY = "Error processing response. Please try again."

PROMPT_PREAMBLE = (
    "You are a professional email assistant. "
    "Generate a concise, contextually appropriate email reply.\n\n"
)
PROMPT_GUIDELINES = (
    "Guidelines:\n"
    "- Match the formality level of the original email\n"
    "- Be direct and actionable\n"
    "- Keep it under 150 words\n"
    "- Don't include subject line, signatures, or greetings\n"
    "- Address the main points raised\n"
)
PROMPT_CLOSING = "\n\nGenerate only the reply content:"


class EmailGeneratorService:
    def __init__(
            self,
            client: Optional[httpx.Client] = None,
            context: Optional[ContextService] = None,
            api_url: Optional[str] = None,
            api_key: Optional[str] = None
    ):
        self.client = client or httpx.Client(timeout=settings.gemini_timeout)
        self.context = context or context_service
        self.api_url = api_url if api_url is not None else settings.gemini_api_url
        self.api_key = api_key if api_key is not None else settings.gemini_api_key

    def generate_reply(self, email_request: EmailRequest) -> str:
        """
        Generate a reply for the email.

        Never raises: transport and parsing failures are turned into
        fixed fallback text so the caller always gets a 200 with a body.
        """
        prompt = self.build_prompt(email_request)

        try:
            response_body = self._post(GenerateContentRequest.from_prompt(prompt))
        except TransportFailure as e:
            logger.warning(f"Generation API call failed: {e}")
            return UNAVAILABLE_REPLY

        try:
            return self.extract_response_content(response_body)
        except ParseFailure as e:
            logger.warning(f"Could not parse generation API response: {e}")
            return PARSE_ERROR_REPLY

    def build_prompt(self, email_request: EmailRequest) -> str:
        email_content = email_request.email_content or ""
        guidance = self.context.get_contextual_prompt(email_content, email_request.tone)
        logger.debug(f"Using guidance: {guidance}")

        prompt = PROMPT_PREAMBLE
        prompt += PROMPT_GUIDELINES
        prompt += f"- {guidance}\n\n"
        prompt += f"Original email content:\n{email_content}"
        prompt += PROMPT_CLOSING
        return prompt

    def extract_response_content(self, response_body: str) -> str:
        """Pull candidates[0].content.parts[0].text out of the response"""
        try:
            data: Any = json.loads(response_body)
            part = data["candidates"][0]["content"]["parts"][0]
        except (ValueError, TypeError, KeyError, IndexError, RecursionError) as e:
            raise ParseFailure(f"unexpected response shape: {e!r}") from e

        if not isinstance(part, dict):
            raise ParseFailure(f"expected an object in parts[0], got {type(part).__name__}")

        text = part.get("text", "")
        if isinstance(text, (dict, list)):
            text = ""
        elif not isinstance(text, str):
            # scalars read back as their json text: null, true, 12
            text = json.dumps(text)
        return text.strip()

    def _post(self, body: GenerateContentRequest) -> str:
        try:
            response = self.client.post(
                self.api_url + self.api_key,
                headers={"Content-Type": "application/json"},
                content=body.model_dump_json(by_alias=True),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportFailure(f"status {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportFailure(f"{type(e).__name__}: {e}") from e

        return response.text

    def close(self):
        self.client.close()


email_generator_service = EmailGeneratorService()

def get_email_generator() -> EmailGeneratorService:
    return email_generator_service
